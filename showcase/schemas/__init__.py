"""Pydantic request/response schemas."""

from showcase.schemas.auth import (
    AuthResponse,
    LoginRequest,
    PublicUser,
    RegisterRequest,
    TokenClaims,
)
from showcase.schemas.comment import CommentCreate, CommentRead
from showcase.schemas.health import HealthResponse
from showcase.schemas.project import ProjectCreate, ProjectRead, StatusUpdate

__all__ = [
    "AuthResponse",
    "CommentCreate",
    "CommentRead",
    "HealthResponse",
    "LoginRequest",
    "ProjectCreate",
    "ProjectRead",
    "PublicUser",
    "RegisterRequest",
    "StatusUpdate",
    "TokenClaims",
]
