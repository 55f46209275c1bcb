"""
API routes for user profiles
"""

from fastapi import APIRouter, Depends, HTTPException, status
from typing import Optional

from app.models.profile import Profile, ProfileResponse, ProfileUpdate
from app.services.profile_service import ProfileService
from app.middleware.auth import optional_viewer, verify_supabase_jwt
from app.middleware.errors import raise_for_fetch_error, raise_for_result
from core.database import get_supabase

router = APIRouter()


@router.get("/profile", response_model=ProfileResponse)
async def get_my_profile(
    user_id: str = Depends(verify_supabase_jwt),
    supabase=Depends(get_supabase)
):
    """Profile of the authenticated user"""
    service = ProfileService(supabase, viewer_id=user_id)
    profile = await service.refetch()
    if profile is None:
        raise_for_fetch_error(service.error, "profile")

    return ProfileResponse(profile=Profile(**profile))


@router.get("/profiles/{user_id}", response_model=ProfileResponse)
async def get_profile(
    user_id: str,
    viewer_id: Optional[str] = Depends(optional_viewer),
    supabase=Depends(get_supabase)
):
    """Public profile of any user"""
    service = ProfileService(supabase, viewer_id=viewer_id, user_id=user_id)
    profile = await service.refetch()
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=service.error or f"Profile for user {user_id} not found"
        )

    return ProfileResponse(profile=Profile(**profile))


@router.patch("/profiles/{user_id}", response_model=ProfileResponse)
async def update_profile(
    user_id: str,
    updates: ProfileUpdate,
    viewer_id: str = Depends(verify_supabase_jwt),
    supabase=Depends(get_supabase)
):
    """Update a profile; only its owner may do so"""
    update_data = updates.model_dump(exclude_unset=True)
    if not update_data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update"
        )

    service = ProfileService(supabase, viewer_id=viewer_id, user_id=user_id)
    result = await service.update_profile(update_data)
    raise_for_result(result)

    return ProfileResponse(
        profile=Profile(**result.data),
        message="Profile updated"
    )
