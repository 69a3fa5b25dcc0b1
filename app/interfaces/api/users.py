"""Users API routes — registration, lookup, PUT/PATCH updates, delete."""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from app.interfaces.api.deps import pagination
from app.interfaces.deps import get_user_repository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.common import Page, PageRequest
from app.domain.schemas.user import UserCreate, UserPatch, UserPut, UserPutResponse, UserResponse
from app.application.services import user_service

router = APIRouter(prefix="/api/v1/users", tags=["Users"])

USER_SORTABLE = ("id", "username", "email", "first_name", "last_name", "role", "created_at", "updated_at")


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    request: Request,
    response: Response,
    repo: UserRepository = Depends(get_user_repository),
):
    created = user_service.create_user(repo, body)
    response.headers["Location"] = str(request.url_for("get_user", user_id=created.id))
    return created


@router.get("", response_model=Page[UserResponse])
def list_users(
    page_request: PageRequest = Depends(pagination(USER_SORTABLE)),
    repo: UserRepository = Depends(get_user_repository),
):
    return user_service.get_all_users(repo, page_request)


@router.get("/search-username", response_model=UserResponse)
def get_by_username(
    username: str = Query(..., min_length=1),
    repo: UserRepository = Depends(get_user_repository),
):
    return user_service.find_by_username(repo, username)


@router.get("/search-email", response_model=UserResponse)
def get_by_email(
    email: str = Query(..., min_length=1),
    repo: UserRepository = Depends(get_user_repository),
):
    return user_service.find_by_email(repo, email)


@router.get("/{user_id}", response_model=UserResponse, name="get_user")
def get_user(user_id: int, repo: UserRepository = Depends(get_user_repository)):
    return user_service.find_by_id(repo, user_id)


@router.put("/{user_id}", response_model=UserPutResponse)
def update_full(user_id: int, body: UserPut, repo: UserRepository = Depends(get_user_repository)):
    return user_service.put_user(repo, user_id, body)


@router.patch("/{user_id}", response_model=UserResponse)
def update_partial(user_id: int, body: UserPatch, repo: UserRepository = Depends(get_user_repository)):
    return user_service.patch_user(repo, user_id, body)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, repo: UserRepository = Depends(get_user_repository)):
    user_service.delete_user(repo, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
