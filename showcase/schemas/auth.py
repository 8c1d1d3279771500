"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from showcase.models.enums import Role


class RegisterRequest(BaseModel):
    """
    Registration body. Fields are optional here so that missing values reach the
    credential store and are reported as 400 validation errors.
    """

    model_config = ConfigDict(extra="ignore")

    username: str | None = Field(
        default=None,
        validation_alias=AliasChoices("username", "name"),
        description="Username (also accepted as 'name')",
    )
    email: str | None = Field(default=None, description="Email address; must contain '@'")
    password: str | None = Field(default=None, description="Password, at least 6 characters")
    role: str | None = Field(default=None, description="Optional role: 'user' or 'admin'")


class LoginRequest(BaseModel):
    """Credentials for login: username or email, plus password."""

    model_config = ConfigDict(extra="ignore")

    username: str | None = Field(default=None, description="Username")
    email: str | None = Field(default=None, description="Email address")
    password: str | None = Field(default=None, description="Password")


class PublicUser(BaseModel):
    """User as returned to clients (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    role: Role
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    """JWT access token and the authenticated user."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")
    token_type: str = Field(default="bearer", description="Token type")
    user: PublicUser


class TokenClaims(BaseModel):
    """Decoded claims of a verified access token, used for dependency injection."""

    id: str
    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
