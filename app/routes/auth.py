"""
Authentication session routes

Current-user lookup and sign-out through Supabase auth.
"""

import logging
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel
from typing import Optional

from app.middleware.auth import parse_bearer_token, resolve_user
from core.database import get_supabase

logger = logging.getLogger(__name__)

router = APIRouter()


class CurrentUserResponse(BaseModel):
    """Response model for the signed-in user"""
    user_id: str
    email: Optional[str] = None


def _require_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return parse_bearer_token(authorization)


@router.get("/auth/me", response_model=CurrentUserResponse)
async def current_user(authorization: Optional[str] = Header(None)):
    """Current session user"""
    user = resolve_user(_require_token(authorization))
    return CurrentUserResponse(user_id=str(user.id), email=getattr(user, 'email', None))


@router.post("/auth/signout")
async def sign_out(authorization: Optional[str] = Header(None)):
    """
    Revoke the session behind the bearer token

    Returns:
        Confirmation message
    """
    token = _require_token(authorization)
    user = resolve_user(token)

    try:
        get_supabase().auth.admin.sign_out(token)
        logger.info(f"🔓 Signed out user: {user.id}")
        return {"message": "Signed out"}

    except Exception as e:
        logger.error(f"❌ Failed to sign out user {user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to sign out: {str(e)}"
        )
