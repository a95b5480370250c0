"""
User model for the JSON document store.
"""
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    User record as persisted in the document's ``users`` list.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Unique user ID")
    username: str = Field(..., description="Unique, case-sensitive username")
    hashed_password: str = Field(
        ...,
        alias="password",
        description="Bcrypt hashed password (stored under the legacy `password` key)",
    )
    is_admin: bool = Field(
        default=False,
        alias="isAdmin",
        description="Admin flag; never set by the API",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
        description="Account creation timestamp",
    )
