"""
Domain exceptions raised by the service layer.

Routers translate these into HTTP status codes; the mapping depends on the
endpoint (an unknown user is a 400 on login, an unknown article a 404 on delete).
"""


class BlogError(Exception):
    """Base exception for business rule violations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BlogError):
    """Raised when a required field is missing or empty."""


class ConflictError(BlogError):
    """Raised when a username is already taken."""


class NotFoundError(BlogError):
    """Raised when a user or article does not exist."""


class AuthError(BlogError):
    """Raised on bad credentials or a missing, invalid or expired token."""


class ForbiddenError(BlogError):
    """Raised when an authenticated user lacks permission for an action."""
