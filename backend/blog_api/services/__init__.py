"""
Service layer for business logic.
"""
from blog_api.services.auth_service import AuthService
from blog_api.services.article_service import ArticleService

__all__ = [
    "AuthService",
    "ArticleService",
]
