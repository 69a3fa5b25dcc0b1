"""User domain model — maps to the 'users' table."""

import enum

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum

from app.infrastructure.database import Base


class UserRole(str, enum.Enum):
    CUSTOMER = "CUSTOMER"
    SELLER = "SELLER"
    ADMIN = "ADMIN"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(50), nullable=True)
    last_name = Column(String(50), nullable=True)
    phone = Column(String(30), nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    role = Column(Enum(UserRole, name="user_role"), nullable=False, default=UserRole.CUSTOMER)

    # Audit timestamps are assigned by the service layer, never by the database
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<User {self.id} - {self.username}>"
