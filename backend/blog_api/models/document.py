"""
Root document holding every persisted user and article.
"""
import time

from pydantic import BaseModel, Field

from blog_api.models.article import Article
from blog_api.models.user import User


class Document(BaseModel):
    """The whole application state, read and written as one JSON file."""

    users: list[User] = Field(default_factory=list)
    articles: list[Article] = Field(default_factory=list)

    def next_id(self) -> int:
        """
        Allocate a new record ID.

        IDs are millisecond timestamps bumped past the largest ID already in
        use, so two records created in the same millisecond never collide.
        Callers must hold the store's transaction lock.
        """
        now_ms = int(time.time() * 1000)
        used = [user.id for user in self.users] + [article.id for article in self.articles]
        return max(now_ms, max(used, default=0) + 1)

    def find_user(self, username: str) -> User | None:
        return next((user for user in self.users if user.username == username), None)

    def find_article(self, article_id: int) -> Article | None:
        return next((article for article in self.articles if article.id == article_id), None)
