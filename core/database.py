"""
Supabase client access
"""

import logging
from typing import Optional
from supabase import create_client, Client

from core.config import Config

logger = logging.getLogger(__name__)

_supabase_client: Optional[Client] = None


def get_supabase() -> Client:
    """Get or create Supabase client (singleton)"""
    global _supabase_client

    if _supabase_client is None:
        supabase_url = Config.get_supabase_url()
        supabase_key = Config.get_supabase_key()

        if not supabase_url or not supabase_key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        _supabase_client = create_client(supabase_url, supabase_key)
        logger.info("✅ Supabase client initialized")

    return _supabase_client


def rows(result) -> list:
    """Rows of a query result as a list, whether .data holds a list, one row or nothing"""
    if result is None or result.data is None:
        return []
    if isinstance(result.data, list):
        return result.data
    return [result.data]
