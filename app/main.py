"""FastAPI applications — entry points for user-service and product-service.

Run one of them with uvicorn::

    uvicorn app.main:user_app --port 8081
    uvicorn app.main:product_app --port 8082
"""

import structlog
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from app.config import get_settings
from app.infrastructure.database import engine, Base
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import setup_exception_handlers
from app.core.log_codes import LogCode

# Import all models so SQLAlchemy knows about them
from app.domain.models.user import User
from app.domain.models.category import Category
from app.domain.models.product import Product

from app.interfaces.api.users import router as users_router
from app.interfaces.api.categories import router as categories_router
from app.interfaces.api.products import router as products_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)

USER_SERVICE = "user"
PRODUCT_SERVICE = "product"

_SERVICES = {
    USER_SERVICE: {
        "name": settings.USER_SERVICE_NAME,
        "title": "User Service",
        "description": "User registration, lookup and profile management",
        "tables": [User.__table__],
        "routers": [users_router],
        "log_codes": {
            "validation": LogCode.USER_VALIDATION_FAILED,
            "internal": LogCode.USER_INTERNAL_ERROR,
        },
    },
    PRODUCT_SERVICE: {
        "name": settings.PRODUCT_SERVICE_NAME,
        "title": "Product Service",
        "description": "Product catalog and category management",
        "tables": [Category.__table__, Product.__table__],
        "routers": [categories_router, products_router],
        "log_codes": {
            "validation": LogCode.PRODUCT_VALIDATION_FAILED,
            "internal": LogCode.PRODUCT_INTERNAL_ERROR,
        },
    },
}


def create_app(service: str) -> FastAPI:
    """Assemble the FastAPI application for one service."""
    conf = _SERVICES[service]

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan — startup and shutdown events."""
        logger.info("Starting service", service=conf["name"], env=settings.ENVIRONMENT)

        # Create DB tables (dev only, use migrations in production)
        Base.metadata.create_all(bind=engine, tables=conf["tables"])
        logger.info("Database tables created/verified", service=conf["name"])

        yield

        logger.info("Service stopped", service=conf["name"])

    app = FastAPI(
        title=conf["title"],
        description=conf["description"],
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.service_name = conf["name"]
    app.state.log_codes = conf["log_codes"]

    setup_middleware(app)
    setup_exception_handlers(app)

    for router in conf["routers"]:
        app.include_router(router)
    app.include_router(_meta_router(conf["name"]))

    return app


def _meta_router(service_name: str) -> APIRouter:
    router = APIRouter(tags=["Meta"])

    @router.get("/")
    def root():
        return {
            "name": service_name,
            "version": "1.0.0",
            "status": "running",
            "docs": "/docs",
        }

    @router.get("/health")
    def health():
        return {"status": "healthy"}

    return router


user_app = create_app(USER_SERVICE)
product_app = create_app(PRODUCT_SERVICE)
