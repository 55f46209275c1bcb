"""
API routes for user posts (feed, author CRUD, likes)
"""

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from app.models.feed import FeedCard
from app.models.post import (
    GetPostsResponse,
    LikeToggleResponse,
    Post,
    PostCreate,
    PostResponse,
    PostUpdate
)
from app.services.post_service import PostService
from app.middleware.auth import optional_viewer, verify_supabase_jwt
from app.middleware.errors import raise_for_fetch_error, raise_for_result
from core.database import get_supabase

router = APIRouter()


def _post_from(service: PostService, row: dict) -> Post:
    """Prefer the enriched copy from the refetched list"""
    enriched = service.find_post(row.get('id'))
    return Post(**(enriched or row))


@router.get("/posts", response_model=GetPostsResponse)
async def list_posts(
    user_id: Optional[str] = None,
    published: Optional[bool] = None,
    viewer_id: Optional[str] = Depends(optional_viewer),
    supabase=Depends(get_supabase)
):
    """
    List posts newest first

    Args:
        user_id: Only posts owned by this user
        published: Filter on publication state; defaults to published-only
                   when no user_id is given
        viewer_id: Optional signed-in viewer, used for the liked flag

    Returns:
        Posts with author, likes_count, comments_count and is_liked
    """
    service = PostService(supabase, viewer_id=viewer_id, user_id=user_id, published=published)
    posts = await service.refetch()
    raise_for_fetch_error(service.error, "posts")

    return GetPostsResponse(
        posts=[Post(**p) for p in posts],
        total=len(posts)
    )


@router.get("/dashboard/posts", response_model=GetPostsResponse)
async def list_my_posts(
    published: Optional[bool] = None,
    user_id: str = Depends(verify_supabase_jwt),
    supabase=Depends(get_supabase)
):
    """All posts of the authenticated user, drafts included unless filtered"""
    service = PostService(supabase, viewer_id=user_id, user_id=user_id, published=published)
    posts = await service.refetch()
    raise_for_fetch_error(service.error, "posts")

    return GetPostsResponse(
        posts=[Post(**p) for p in posts],
        total=len(posts)
    )


@router.post("/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post: PostCreate,
    user_id: str = Depends(verify_supabase_jwt),
    supabase=Depends(get_supabase)
):
    """Create a post owned by the authenticated user"""
    service = PostService(supabase, viewer_id=user_id, user_id=user_id)
    result = await service.create_post(post.model_dump())
    raise_for_result(result)

    return PostResponse(
        post=_post_from(service, result.data),
        message="Post created"
    )


@router.patch("/posts/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    updates: PostUpdate,
    user_id: str = Depends(verify_supabase_jwt),
    supabase=Depends(get_supabase)
):
    """Update a post; only its owner may do so"""
    update_data = updates.model_dump(exclude_unset=True)
    if not update_data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update"
        )

    service = PostService(supabase, viewer_id=user_id, user_id=user_id)
    result = await service.update_post(post_id, update_data)
    raise_for_result(result)

    return PostResponse(
        post=_post_from(service, result.data),
        message="Post updated"
    )


@router.delete("/posts/{post_id}")
async def delete_post(
    post_id: str,
    user_id: str = Depends(verify_supabase_jwt),
    supabase=Depends(get_supabase)
):
    """Delete a post; only its owner may do so"""
    service = PostService(supabase, viewer_id=user_id, user_id=user_id)
    result = await service.delete_post(post_id)
    raise_for_result(result)

    return {"message": f"Post {post_id} deleted"}


@router.post("/posts/{post_id}/like", response_model=LikeToggleResponse)
async def toggle_like(
    post_id: str,
    user_id: str = Depends(verify_supabase_jwt),
    supabase=Depends(get_supabase)
):
    """Like or unlike a post for the authenticated user"""
    service = PostService(supabase, viewer_id=user_id)
    result = await service.toggle_like(post_id)
    raise_for_result(result)

    return LikeToggleResponse(**result.data)


@router.get("/feed", response_model=List[FeedCard])
async def post_feed(
    viewer_id: Optional[str] = Depends(optional_viewer),
    supabase=Depends(get_supabase)
):
    """Published posts as listing cards"""
    service = PostService(supabase, viewer_id=viewer_id)
    posts = await service.refetch()
    raise_for_fetch_error(service.error, "posts")

    return [FeedCard.from_post(Post(**p)) for p in posts]
