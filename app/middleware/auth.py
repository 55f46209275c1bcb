"""
Authentication middleware for Supabase JWT validation
Uses Supabase client library to verify tokens.
"""

from fastapi import HTTPException, status, Header
from typing import Optional
import logging

from core.database import get_supabase

logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def parse_bearer_token(authorization: str) -> str:
    """Extract the token from 'Bearer <token>'"""
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.warning("🔒 Invalid Authorization format")
        raise _unauthorized("Invalid Authorization header format. Expected: Bearer <token>")
    return parts[1]


def resolve_user(token: str):
    """
    Look up the Supabase user that owns a JWT

    Args:
        token: Raw access token

    Returns:
        Supabase user object

    Raises:
        HTTPException: If the token is invalid
    """
    try:
        user_response = get_supabase().auth.get_user(token)

        if not user_response or not user_response.user:
            logger.warning("🔒 Invalid token - no user found")
            raise _unauthorized("Invalid authentication token")

        logger.debug(f"✅ JWT validated successfully for user: {user_response.user.id}")
        return user_response.user

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error verifying JWT: {str(e)}")
        raise _unauthorized("Invalid authentication token")


async def verify_supabase_jwt(authorization: Optional[str] = Header(None)) -> str:
    """
    Verify Supabase JWT token from Authorization header using Supabase client

    Args:
        authorization: Authorization header value (Bearer TOKEN)

    Returns:
        The user_id extracted from the JWT token

    Raises:
        HTTPException: If token is missing or invalid
    """
    if not authorization:
        logger.warning("🔒 API request without Authorization header")
        raise _unauthorized("Missing Authorization header")

    return str(resolve_user(parse_bearer_token(authorization)).id)


async def optional_viewer(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """
    Viewer id for public reads: None without a header, 401 for a bad token
    """
    if not authorization:
        return None

    return str(resolve_user(parse_bearer_token(authorization)).id)
