"""
Profile data-access service
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from app.models.post import MutationResult
from core.config import Config
from core.database import rows
from core.errors import BlogError, StoreError, UnauthorizedError


class ProfileService:
    """Holds one profile, addressed by explicit user id or else the viewer"""

    def __init__(self, supabase, viewer_id: Optional[str] = None, user_id: Optional[str] = None):
        self.logger = logging.getLogger(__name__)
        self.supabase = supabase
        self.viewer_id = viewer_id
        self.target_user_id = user_id or viewer_id

        self.profile: Optional[Dict] = None
        self.loading = False
        self.error: Optional[str] = None

    async def refetch(self) -> Optional[Dict]:
        """
        Load the target profile

        Returns:
            Profile row, or None when there is no target or the fetch failed
        """
        if not self.target_user_id:
            return None

        self.loading = True
        try:
            result = await self._execute(
                self.supabase.table(Config.PROFILES_TABLE).select('*').eq(
                    'user_id', self.target_user_id
                ).limit(1)
            )
            found = rows(result)
            if not found:
                raise StoreError(f"Profile not found for user: {self.target_user_id}")

            self.profile = found[0]
            self.error = None

        except BlogError as e:
            self.logger.error(f"Error loading profile: {e.message}")
            self.error = e.message
        finally:
            self.loading = False

        return self.profile

    async def update_profile(self, updates: Dict[str, Any]) -> MutationResult:
        """Update the profile; only its owner may do so"""
        if not self.viewer_id or self.viewer_id != self.target_user_id:
            error = UnauthorizedError()
            self.logger.warning(f"Profile update rejected for viewer {self.viewer_id} on {self.target_user_id}")
            return MutationResult(error=error.message, error_type=error.error_type)

        try:
            result = await self._execute(
                self.supabase.table(Config.PROFILES_TABLE).update(updates).eq('user_id', self.viewer_id)
            )
            updated = rows(result)
            if not updated:
                raise StoreError("Profile not found")

            self.profile = updated[0]
            self.logger.info(f"Updated profile for user: {self.viewer_id}")
            return MutationResult(data=self.profile)

        except BlogError as e:
            self.logger.error(f"Error updating profile: {e.message}")
            return MutationResult(error=e.message, error_type=e.error_type)

    async def _execute(self, query):
        try:
            return await asyncio.to_thread(query.execute)
        except Exception as e:
            raise StoreError(str(e)) from e
