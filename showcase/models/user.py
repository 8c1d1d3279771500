"""ORM model for application users (auth and RBAC)."""

import uuid

from sqlalchemy import Column, DateTime, String, func

from showcase.models.base import Base
from showcase.models.enums import Role


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'user'; never changed after registration.
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=Role.USER.value)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
