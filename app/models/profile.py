"""
Pydantic models for user profiles
"""

from pydantic import BaseModel, Field
from typing import Optional


class Profile(BaseModel):
    """Public metadata about a user"""
    id: str
    user_id: str
    username: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        from_attributes = True


class ProfileUpdate(BaseModel):
    """Model for updating a profile; unset fields are left alone"""
    username: Optional[str] = Field(None, min_length=1, max_length=50)
    display_name: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = Field(None, max_length=1000)
    avatar_url: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = Field(None, max_length=100)


class ProfileResponse(BaseModel):
    """Response model for single profile"""
    profile: Optional[Profile] = None
    message: Optional[str] = None
