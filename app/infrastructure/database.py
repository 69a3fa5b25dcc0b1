"""SQLAlchemy engine, session factory and declarative base."""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import get_settings

settings = get_settings()


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    # In-memory SQLite lives as long as its single connection
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    **_engine_kwargs(settings.DATABASE_URL),
)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=True)

Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """One session per request; anything not committed is rolled back on close."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
