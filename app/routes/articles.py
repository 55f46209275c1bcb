"""
API routes for the demo article listing (in-memory, per session)
"""

from fastapi import APIRouter, Header, HTTPException, status
from typing import Optional

from app.models.article import Article, ArticleCreate, ArticleDetailResponse
from app.models.feed import ArticleListResponse, FeedCard
from app.services.article_catalog import ArticleCatalog
from core.config import Config
from core.seed_data import get_seed_article

router = APIRouter()


@router.get("/articles", response_model=ArticleListResponse)
async def list_articles(
    search: Optional[str] = None,
    category: Optional[str] = None,
    x_session_id: Optional[str] = Header(None, alias="X-Session-Id")
):
    """
    List the session's articles filtered by category and search text

    Args:
        search: Case-insensitive text matched against title, excerpt,
                content, author and tags
        category: One of Config.CATEGORIES; 'All' or empty means no filter
        x_session_id: Catalog session

    Returns:
        Matching article cards
    """
    catalog = ArticleCatalog.for_session(x_session_id)
    search_term = search or ''
    articles = catalog.list_articles(category=category, search=search_term)

    return ArticleListResponse(
        articles=[FeedCard.from_article(a) for a in articles],
        total=len(articles),
        search=search_term,
        category=category or '',
        categories=Config.CATEGORIES,
        show_create_form=catalog.show_create_form,
        results_found=bool(search_term.strip()) and len(articles) > 0
    )


@router.get("/articles/{article_id}", response_model=ArticleDetailResponse)
async def get_article(article_id: str):
    """
    Article detail by exact id

    The content is trusted seed HTML and is returned unsanitized.
    """
    article = get_seed_article(article_id)
    if article is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post Not Found"
        )

    return ArticleDetailResponse(article=Article(**article))


@router.post("/articles", response_model=ArticleDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    form: ArticleCreate,
    x_session_id: Optional[str] = Header(None, alias="X-Session-Id")
):
    """Add an article to the session's list (never persisted)"""
    catalog = ArticleCatalog.for_session(x_session_id)
    article = catalog.create(form)
    if article is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Title, content and author are required"
        )

    return ArticleDetailResponse(article=article)


@router.post("/articles/compose")
async def open_create_form(
    x_session_id: Optional[str] = Header(None, alias="X-Session-Id")
):
    """Open the create-post form for the session"""
    catalog = ArticleCatalog.for_session(x_session_id)
    return {"show_create_form": catalog.request_create_form()}


@router.post("/articles/{article_id}/like", response_model=FeedCard)
async def toggle_article_like(
    article_id: str,
    x_session_id: Optional[str] = Header(None, alias="X-Session-Id")
):
    """Flip the session-local liked flag of an article"""
    catalog = ArticleCatalog.for_session(x_session_id)
    article = catalog.toggle_like(article_id)
    if article is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Article {article_id} not found"
        )

    return FeedCard.from_article(article)


@router.delete("/articles/{article_id}")
async def delete_article(
    article_id: str,
    x_session_id: Optional[str] = Header(None, alias="X-Session-Id")
):
    """Remove an article from the session's list"""
    catalog = ArticleCatalog.for_session(x_session_id)
    deleted = catalog.delete(article_id)
    return {"deleted": deleted, "article_id": article_id}
