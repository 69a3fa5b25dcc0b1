"""
Shared pytest fixtures.
Points both services at an in-memory SQLite database before the app is imported.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.infrastructure.database import Base, SessionLocal, engine
from app.main import product_app, user_app  # registers every model

T0 = datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    """Successive, strictly increasing timestamps for audit fields."""
    return [T0 + timedelta(minutes=i) for i in range(10)]


@pytest.fixture
def clean_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(clean_db):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user_client(clean_db):
    with TestClient(user_app) as c:
        yield c


@pytest.fixture
def product_client(clean_db):
    with TestClient(product_app) as c:
        yield c
