"""
Request and response schemas for API endpoints.
"""
from blog_api.schemas.auth import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
    PublicUser,
    TokenClaims,
)
from blog_api.schemas.article import (
    ArticleCreate,
    ArticleCreateResponse,
    MessageResponse,
)

__all__ = [
    # Auth
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "PublicUser",
    "TokenClaims",
    # Articles
    "ArticleCreate",
    "ArticleCreateResponse",
    "MessageResponse",
]
