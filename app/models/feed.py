"""
Normalized card view model shared by persisted posts and seed articles
"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from bs4 import BeautifulSoup

from app.models.article import Article
from app.models.post import Post
from core.config import Config


def get_excerpt(content: str, max_length: int = Config.EXCERPT_MAX_LENGTH) -> str:
    """
    Plain-text preview of a post body

    Args:
        content: Post body, possibly HTML
        max_length: Characters to keep before adding an ellipsis

    Returns:
        Text content, truncated with '...' when longer than max_length
    """
    text = BeautifulSoup(content or '', 'html.parser').get_text(' ', strip=True)
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + '...'


class FeedCard(BaseModel):
    """What a listing card shows, regardless of where the record came from"""
    source: Literal['post', 'article']
    id: str
    title: str
    excerpt: str
    image: Optional[str] = None
    author_name: str
    author_avatar: Optional[str] = None
    date: str
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    likes_count: int = 0
    comments_count: int = 0
    is_liked: bool = False
    read_time: Optional[str] = None
    featured: bool = False

    @classmethod
    def from_post(cls, post: Post) -> "FeedCard":
        author = post.profiles
        author_name = 'Unknown'
        if author:
            author_name = author.display_name or author.username
        return cls(
            source='post',
            id=post.id,
            title=post.title,
            excerpt=post.excerpt or get_excerpt(post.content),
            image=post.featured_image,
            author_name=author_name,
            author_avatar=author.avatar_url if author else None,
            date=post.created_at,
            category=post.category,
            tags=post.tags or [],
            likes_count=post.likes_count,
            comments_count=post.comments_count,
            is_liked=post.is_liked,
        )

    @classmethod
    def from_article(cls, article: Article) -> "FeedCard":
        return cls(
            source='article',
            id=article.id,
            title=article.title,
            excerpt=article.excerpt or get_excerpt(article.content),
            image=article.banner_image,
            author_name=article.author,
            date=article.date,
            category=article.category or None,
            tags=article.tags,
            likes_count=article.likes_count,
            is_liked=article.liked,
            read_time=article.read_time,
            featured=article.featured,
        )


class ArticleListResponse(BaseModel):
    """Response model for GET /api/articles"""
    articles: List[FeedCard]
    total: int
    search: str = ''
    category: str = ''
    categories: List[str]
    show_create_form: bool = False
    results_found: bool = False


class HomePageResponse(BaseModel):
    """Response model for GET /api/pages/home"""
    featured: List[FeedCard]
    recent: List[FeedCard]
