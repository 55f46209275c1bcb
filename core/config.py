"""
Configuration management for blogbuddy backend
"""

import os
from typing import List


class Config:
    """Centralized configuration constants and environment management"""

    # Blog listing
    CATEGORIES = ['All', 'Technology', 'Travel', 'Food', 'Lifestyle', 'Business']
    ALL_CATEGORIES = 'All'
    RECENT_POSTS_LIMIT = 3
    EXCERPT_MAX_LENGTH = 150

    # Demo post defaults
    DEMO_READ_TIME = '1 min read'
    DEFAULT_SESSION_ID = 'default'
    MAX_CATALOG_SESSIONS = 1000

    # Supabase tables
    POSTS_TABLE = 'posts'
    PROFILES_TABLE = 'profiles'
    LIKES_TABLE = 'likes'
    COMMENTS_TABLE = 'comments'

    @staticmethod
    def get_supabase_url() -> str:
        return os.getenv('SUPABASE_URL', '')

    @staticmethod
    def get_supabase_key() -> str:
        return os.getenv('SUPABASE_SERVICE_ROLE_KEY', '')

    @staticmethod
    def get_cors_origins() -> List[str]:
        """Get allowed CORS origins"""
        return os.getenv('CORS_ORIGINS', 'http://localhost:3000,http://localhost:5173').split(',')

    @staticmethod
    def get_enrichment_concurrency() -> int:
        """
        Maximum number of in-flight store lookups while enriching a post list

        Returns:
            Positive integer (falls back to 8 on bad input)
        """
        try:
            value = int(os.getenv('ENRICHMENT_CONCURRENCY', '8'))
        except ValueError:
            return 8
        return value if value > 0 else 8
