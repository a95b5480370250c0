"""
Articles router for listing, publishing and deleting articles.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from blog_api.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from blog_api.database.connections import get_store
from blog_api.database.store import JsonStore
from blog_api.dependencies.auth import CurrentClaims
from blog_api.models.article import Article
from blog_api.schemas.article import ArticleCreate, ArticleCreateResponse, MessageResponse
from blog_api.services.article_service import ArticleService

router = APIRouter(prefix="/api/articles", tags=["Articles"])


async def get_article_service(store: JsonStore = Depends(get_store)) -> ArticleService:
    """Dependency to get ArticleService instance."""
    return ArticleService(store)


@router.get(
    "",
    response_model=list[Article],
    summary="List articles",
)
async def list_articles(
    article_service: ArticleService = Depends(get_article_service),
):
    """
    List all articles, newest publication day first.

    Public endpoint, no token required.
    """
    return await article_service.list_articles()


@router.post(
    "",
    response_model=ArticleCreateResponse,
    summary="Publish an article",
)
async def create_article(
    body: ArticleCreate,
    claims: CurrentClaims,
    article_service: ArticleService = Depends(get_article_service),
):
    """
    Publish a new article as the authenticated user.

    - **title**: Article title (required)
    - **content**: Article body (required)

    Requires header: `Authorization: Bearer <token>`
    """
    try:
        article = await article_service.create_article(claims, body.title, body.content)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return ArticleCreateResponse(article=article)


@router.delete(
    "/{article_id}",
    response_model=MessageResponse,
    summary="Delete an article",
)
async def delete_article(
    article_id: str,
    claims: CurrentClaims,
    article_service: ArticleService = Depends(get_article_service),
):
    """
    Delete an article. Only its author or an admin may delete it.

    Requires header: `Authorization: Bearer <token>`
    """
    # Non-numeric IDs cannot match any article
    try:
        parsed_id = int(article_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article not found",
        )

    try:
        await article_service.delete_article(claims, parsed_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except ForbiddenError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message,
        )

    return MessageResponse(message="Article deleted")
