"""
Pydantic models for user post API requests/responses
"""

from pydantic import BaseModel, Field
from typing import Any, List, Optional


class AuthorSummary(BaseModel):
    """Author profile fields joined onto a post"""
    username: str
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None


class PostBase(BaseModel):
    """Fields an author can write"""
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    published: bool = False


class PostCreate(PostBase):
    """Model for creating a new post"""
    pass


class PostUpdate(BaseModel):
    """Model for updating an existing post"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    published: Optional[bool] = None


class Post(BaseModel):
    """Post row enriched with author and counts at read time"""
    id: str
    user_id: str
    title: str
    content: str
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    published: bool = False
    created_at: str
    updated_at: Optional[str] = None
    profiles: Optional[AuthorSummary] = None
    likes_count: int = 0
    comments_count: int = 0
    is_liked: bool = False


class GetPostsResponse(BaseModel):
    """Response model for GET /api/posts"""
    posts: List[Post]
    total: int


class MutationResult(BaseModel):
    """Outcome of a create/update/delete/like call"""
    data: Optional[Any] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PostResponse(BaseModel):
    """Response model for a single post mutation"""
    post: Optional[Post] = None
    message: Optional[str] = None


class LikeToggleResponse(BaseModel):
    """Response model for POST /api/posts/{post_id}/like"""
    post_id: str
    is_liked: bool
    likes_count: int
