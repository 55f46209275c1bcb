"""
Pydantic models for static demo articles
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class Article(BaseModel):
    """Seed article, plus session-local like state when held by a catalog"""
    id: str
    title: str
    excerpt: str = ''
    content: str
    author: str
    category: str = ''
    tags: List[str] = Field(default_factory=list)
    date: str
    read_time: str
    featured: bool = False
    banner_image: Optional[str] = None
    liked: bool = False
    likes_count: int = 0


class ArticleCreate(BaseModel):
    """Create-post form on the listing page; tags are comma separated"""
    title: str = ''
    excerpt: str = ''
    content: str = ''
    author: str = ''
    category: str = ''
    tags: str = ''


class ArticleDetailResponse(BaseModel):
    """Response model for GET /api/articles/{article_id}"""
    article: Article
