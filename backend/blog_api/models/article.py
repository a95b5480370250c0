"""
Article model for the JSON document store.
"""
import datetime

from pydantic import BaseModel, ConfigDict, Field


class Article(BaseModel):
    """
    Article record as persisted in the document's ``articles`` list
    and returned by the API.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Unique article ID")
    title: str = Field(..., description="Article title")
    content: str = Field(..., description="Article body")
    date: datetime.date = Field(..., description="Publication day (YYYY-MM-DD)")
    author_id: int = Field(..., alias="authorId", description="ID of the creating user")
