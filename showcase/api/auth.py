"""Registration, login and auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from showcase.core.database import get_db
from showcase.core.errors import ForbiddenError
from showcase.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, TokenClaims
from showcase.services.credentials import CredentialStore

router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Create an account and return a JWT access token for it."""
    token, user = CredentialStore(db).register(
        username=body.username,
        email=body.email,
        password=body.password,
        role=body.role,
    )
    return AuthResponse(token=token, user=user)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Authenticate with username or email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    token, user = CredentialStore(db).login(
        username=body.username,
        email=body.email,
        password=body.password,
    )
    return AuthResponse(token=token, user=user)


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str | None:
    """Dependency: raw bearer token from the Authorization header, or None."""
    return credentials.credentials if credentials is not None else None


def get_current_user(
    token: Annotated[str | None, Depends(get_bearer_token)],
) -> TokenClaims:
    """Dependency: require a valid Bearer JWT and return its claims. Raises AuthError (401)."""
    return CredentialStore.verify_token(token)


def require_admin(
    current_user: Annotated[TokenClaims, Depends(get_current_user)],
) -> TokenClaims:
    """Dependency: require authenticated user with role 'admin'. Raises ForbiddenError (403) for non-admin."""
    if not current_user.is_admin:
        raise ForbiddenError("Admin access required")
    return current_user
