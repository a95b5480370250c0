"""
Core module - Security primitives and domain exceptions.
"""
from blog_api.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)
from blog_api.core.exceptions import (
    BlogError,
    ValidationError,
    ConflictError,
    NotFoundError,
    AuthError,
    ForbiddenError,
)

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "BlogError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "AuthError",
    "ForbiddenError",
]
