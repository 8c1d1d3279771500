"""Domain errors raised by services and translated to HTTP responses in showcase.main."""


class ShowcaseError(Exception):
    """Base class for expected failures. Carries the message returned to clients."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ShowcaseError):
    """Missing or malformed input."""

    status_code = 400


class ConflictError(ShowcaseError):
    """A unique field (username, email) is already taken."""

    status_code = 400


class AuthError(ShowcaseError):
    """Bad credentials, or a missing, malformed or expired token."""

    status_code = 401


class ForbiddenError(ShowcaseError):
    """Valid token but the role is not allowed to perform the action."""

    status_code = 403


class NotFoundError(ShowcaseError):
    status_code = 404


class StorageError(ShowcaseError):
    """The database failed. The message is logged, never sent to the client."""

    status_code = 500
