"""
Pydantic models for the persisted document and its records.
"""
from blog_api.models.user import User
from blog_api.models.article import Article
from blog_api.models.document import Document

__all__ = [
    "User",
    "Article",
    "Document",
]
