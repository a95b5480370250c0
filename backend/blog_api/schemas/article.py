"""
Article request/response schemas.
"""
from pydantic import BaseModel, Field

from blog_api.models.article import Article


class ArticleCreate(BaseModel):
    """Article creation request body."""
    title: str = Field(default="", description="Article title")
    content: str = Field(default="", description="Article body")


class ArticleCreateResponse(BaseModel):
    """Article creation response."""
    message: str = Field(default="Article published", description="Success message")
    article: Article = Field(..., description="The created article")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str = Field(..., description="Result message")
