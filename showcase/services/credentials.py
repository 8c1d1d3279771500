"""Credential store: user registration, login and access token verification."""

import logging
import threading
from functools import lru_cache
from typing import TYPE_CHECKING

import jwt
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from showcase.core.config import get_settings
from showcase.core.database import storage_errors
from showcase.core.errors import AuthError, ConflictError, ValidationError
from showcase.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from showcase.models import Role, User
from showcase.schemas.auth import PublicUser, TokenClaims

if TYPE_CHECKING:
    from showcase.core.config import Settings

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@lru_cache
def _dummy_hash() -> str:
    """Hash compared against when no user matches, so both failures cost one bcrypt check."""
    return hash_password("not-a-real-password")


def _parse_role(value: str | None) -> Role:
    if value is None or not value.strip():
        return Role.USER
    try:
        return Role(value.strip().lower())
    except ValueError:
        raise ValidationError(
            f"Invalid role; must be one of {', '.join(r.value for r in Role)}"
        ) from None


def public_user(user: User) -> PublicUser:
    return PublicUser.model_validate(user)


class CredentialStore:
    """Owns the users table. Users are never updated or deleted."""

    # Serializes the check-then-insert in register() across request threads.
    _write_lock = threading.Lock()

    def __init__(self, session: Session, settings: "Settings | None" = None) -> None:
        self.session = session
        self.settings = settings or get_settings()

    def register(
        self,
        username: str | None,
        email: str | None,
        password: str | None,
        role: str | None = None,
    ) -> tuple[str, PublicUser]:
        """
        Create a user and return (access token, public user).

        Raises ValidationError for missing or malformed input and ConflictError
        when the username or email is already registered.
        """
        username = (username or "").strip()
        email = (email or "").strip()
        if not username or not email or not password:
            raise ValidationError("All fields are required")
        if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
            raise ValidationError("Invalid username length")
        if len(password) < PASSWORD_MIN_LEN:
            raise ValidationError(
                f"Password must be at least {PASSWORD_MIN_LEN} characters long"
            )
        if len(password) > PASSWORD_MAX_LEN:
            raise ValidationError(
                f"Password must be at most {PASSWORD_MAX_LEN} characters long"
            )
        if "@" not in email:
            raise ValidationError("Invalid email format")

        user_role = _parse_role(role)
        if user_role == Role.ADMIN and not self.settings.ALLOW_ROLE_SELF_ASSIGNMENT:
            logger.warning("Admin role requested at registration for %s; storing as user", username)
            user_role = Role.USER

        password_hash = hash_password(password, rounds=self.settings.BCRYPT_ROUNDS)

        with self._write_lock, storage_errors(self.session, "registering user"):
            # Usernames and emails share one namespace so neither can shadow the other at login.
            if self.session.query(User).filter(
                or_(User.username == username, User.email == username)
            ).first():
                raise ConflictError("Username already exists")
            if self.session.query(User).filter(
                or_(User.email == email, User.username == email)
            ).first():
                raise ConflictError("Email already exists")
            user = User(
                username=username,
                email=email,
                password_hash=password_hash,
                role=user_role.value,
            )
            self.session.add(user)
            try:
                self.session.commit()
            except IntegrityError:
                # Another process inserted the same username/email first.
                self.session.rollback()
                raise ConflictError("Username or email already exists") from None
            self.session.refresh(user)

        logger.info("Registered user id=%s role=%s", user.id, user.role)
        return self._issue_token(user), public_user(user)

    def login(
        self,
        username: str | None,
        email: str | None,
        password: str | None,
    ) -> tuple[str, PublicUser]:
        """
        Authenticate by username or email. The username is matched only against
        usernames and the email only against emails; when both are sent, either
        may identify the account. Unknown users and wrong passwords raise the
        same AuthError so that account existence is not revealed.
        """
        username = (username or "").strip()
        email = (email or "").strip()
        if not (username or email) or not password:
            raise ValidationError("Email/username and password are required")

        conditions = []
        if username:
            conditions.append(User.username == username)
        if email:
            conditions.append(User.email == email)
        with storage_errors(self.session, "logging in"):
            candidates = self.session.query(User).filter(or_(*conditions)).all()

        if not candidates:
            verify_password(password, _dummy_hash())
            logger.info("Login failed: no matching user")
            raise AuthError(INVALID_CREDENTIALS)
        for user in candidates:
            if verify_password(password, user.password_hash):
                return self._issue_token(user), public_user(user)
        logger.info("Login failed: bad password for user id(s)=%s", ",".join(u.id for u in candidates))
        raise AuthError(INVALID_CREDENTIALS)

    @staticmethod
    def verify_token(token: str | None) -> TokenClaims:
        """Decode a bearer token and return its claims. Raises AuthError if missing, invalid or expired."""
        if not token or not token.strip():
            raise AuthError("No token provided")
        try:
            payload = decode_access_token(token.strip())
        except jwt.PyJWTError:
            raise AuthError("Invalid or expired token") from None
        sub = payload.get("sub")
        role = payload.get("role")
        if not sub or role not in {r.value for r in Role}:
            raise AuthError("Invalid token payload")
        return TokenClaims(id=str(sub), username=str(payload.get("username") or ""), role=role)

    @staticmethod
    def _issue_token(user: User) -> str:
        return create_access_token(sub=user.id, username=user.username, role=user.role)
