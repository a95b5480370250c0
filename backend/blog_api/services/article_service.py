"""
Article service for listing, publishing and deleting articles.
"""
import logging
from datetime import datetime, timezone

from blog_api.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from blog_api.database.store import JsonStore
from blog_api.models.article import Article
from blog_api.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)


class ArticleService:
    """Service for article operations."""

    def __init__(self, store: JsonStore):
        """Initialize with the document store."""
        self.store = store

    async def list_articles(self) -> list[Article]:
        """
        List every article, newest publication day first.

        Articles published on the same day keep their stored order.
        """
        document = self.store.load()
        return sorted(document.articles, key=lambda article: article.date, reverse=True)

    async def create_article(self, claims: TokenClaims, title: str, content: str) -> Article:
        """
        Publish a new article authored by the authenticated user.

        Args:
            claims: Identity of the author
            title: Article title
            content: Article body

        Returns:
            The created Article

        Raises:
            ValidationError: If title or content is empty
        """
        if not title or not content:
            raise ValidationError("Title and content are required")

        async with self.store.transaction() as document:
            article = Article(
                id=document.next_id(),
                title=title,
                content=content,
                date=datetime.now(timezone.utc).date(),
                author_id=claims.user_id,
            )
            document.articles.append(article)

        logger.info("User %s published article %s", claims.user_id, article.id)
        return article

    async def delete_article(self, claims: TokenClaims, article_id: int) -> None:
        """
        Delete an article. Only its author or an admin may do so.

        Raises:
            NotFoundError: If the article does not exist
            ForbiddenError: If the caller is neither the author nor an admin
        """
        async with self.store.transaction() as document:
            article = document.find_article(article_id)

            if article is None:
                raise NotFoundError("Article not found")

            if article.author_id != claims.user_id and not claims.is_admin:
                logger.warning(
                    "User %s refused deletion of article %s", claims.user_id, article_id
                )
                raise ForbiddenError("You do not have permission to delete this article")

            document.articles.remove(article)

        logger.info("User %s deleted article %s", claims.user_id, article_id)
