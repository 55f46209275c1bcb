"""
Post data-access service
Fetches posts with author, like and comment stats, and runs author mutations
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from app.models.post import MutationResult
from core.config import Config
from core.database import rows
from core.errors import BlogError, StoreError, UnauthenticatedError, UnauthorizedError


class PostService:
    """
    Holds the post list for one viewer and query (owner / publication state).

    Every mutation is followed by a full refetch, so counts and the liked flag
    always reflect the store at the time of the last fetch.
    """

    def __init__(
        self,
        supabase,
        viewer_id: Optional[str] = None,
        user_id: Optional[str] = None,
        published: Optional[bool] = None,
        concurrency: Optional[int] = None
    ):
        self.logger = logging.getLogger(__name__)
        self.supabase = supabase
        self.viewer_id = viewer_id
        self.user_id = user_id
        self.published = published
        self.concurrency = concurrency or Config.get_enrichment_concurrency()

        self.posts: List[Dict] = []
        self.loading = False
        self.error: Optional[str] = None

    async def refetch(self) -> List[Dict]:
        """
        Load posts ordered newest first and enrich each with stats

        Without an owner filter and without an explicit publication filter,
        only published posts are returned.

        Returns:
            The enriched post list (empty on failure, with self.error set)
        """
        self.loading = True
        try:
            query = self.supabase.table(Config.POSTS_TABLE).select('*').order('created_at', desc=True)

            if self.user_id:
                query = query.eq('user_id', self.user_id)

            if self.published is not None:
                query = query.eq('published', self.published)
            elif not self.user_id:
                query = query.eq('published', True)

            posts_data = rows(await self._execute(query))

            # Created per fetch so the bound never outlives one event loop
            semaphore = asyncio.Semaphore(self.concurrency)
            self.posts = list(await asyncio.gather(
                *(self._enrich_post(post, semaphore) for post in posts_data)
            ))
            self.error = None
            self.logger.info(f"Loaded {len(self.posts)} posts (user={self.user_id}, published={self.published})")

        except BlogError as e:
            self.logger.error(f"Error loading posts: {e.message}")
            self.posts = []
            self.error = e.message
        finally:
            self.loading = False

        return self.posts

    async def create_post(self, post_data: Dict[str, Any]) -> MutationResult:
        """Insert a post owned by the viewer, then refetch"""
        if not self.viewer_id:
            return self._failure(UnauthenticatedError())

        try:
            result = await self._execute(
                self.supabase.table(Config.POSTS_TABLE).insert({**post_data, 'user_id': self.viewer_id})
            )
            created = rows(result)
            if not created:
                raise StoreError("Post was not created")

            self.logger.info(f"Created post {created[0].get('id')} for user: {self.viewer_id}")
            await self.refetch()
            return MutationResult(data=created[0])

        except BlogError as e:
            return self._failure(e)

    async def update_post(self, post_id: str, updates: Dict[str, Any]) -> MutationResult:
        """Update a post only if the viewer owns it, then refetch"""
        if not self.viewer_id:
            return self._failure(UnauthenticatedError())

        try:
            result = await self._execute(
                self.supabase.table(Config.POSTS_TABLE).update(updates).eq(
                    'id', post_id
                ).eq(
                    'user_id', self.viewer_id
                )
            )
            updated = rows(result)
            if not updated:
                raise UnauthorizedError("Post not found or not owned by you")

            self.logger.info(f"Updated post {post_id} for user: {self.viewer_id}")
            await self.refetch()
            return MutationResult(data=updated[0])

        except BlogError as e:
            return self._failure(e)

    async def delete_post(self, post_id: str) -> MutationResult:
        """Delete a post only if the viewer owns it, then refetch"""
        if not self.viewer_id:
            return self._failure(UnauthenticatedError())

        try:
            result = await self._execute(
                self.supabase.table(Config.POSTS_TABLE).delete().eq(
                    'id', post_id
                ).eq(
                    'user_id', self.viewer_id
                )
            )
            if not rows(result):
                raise UnauthorizedError("Post not found or not owned by you")

            self.logger.info(f"Deleted post {post_id} for user: {self.viewer_id}")
            await self.refetch()
            return MutationResult(data={'id': post_id})

        except BlogError as e:
            return self._failure(e)

    async def toggle_like(self, post_id: str) -> MutationResult:
        """
        Like the post if the viewer has not, otherwise remove the like

        Read-then-write, not atomic: two concurrent toggles from the same
        viewer can double-insert or double-delete unless the store enforces
        uniqueness on (user_id, post_id).

        Returns:
            MutationResult with post_id, is_liked and likes_count
        """
        if not self.viewer_id:
            return self._failure(UnauthenticatedError())

        try:
            existing = rows(await self._execute(
                self.supabase.table(Config.LIKES_TABLE).select('id').eq(
                    'post_id', post_id
                ).eq(
                    'user_id', self.viewer_id
                ).limit(1)
            ))

            if existing:
                await self._execute(
                    self.supabase.table(Config.LIKES_TABLE).delete().eq(
                        'post_id', post_id
                    ).eq(
                        'user_id', self.viewer_id
                    )
                )
                is_liked = False
            else:
                await self._execute(
                    self.supabase.table(Config.LIKES_TABLE).insert({
                        'post_id': post_id,
                        'user_id': self.viewer_id
                    })
                )
                is_liked = True

            self.logger.info(f"{'Liked' if is_liked else 'Unliked'} post {post_id} for user: {self.viewer_id}")
            await self.refetch()

            post = self.find_post(post_id)
            if post is not None:
                likes_count = post['likes_count']
            else:
                likes_count = await self._count_rows(Config.LIKES_TABLE, post_id)

            return MutationResult(data={
                'post_id': post_id,
                'is_liked': is_liked,
                'likes_count': likes_count
            })

        except BlogError as e:
            return self._failure(e)

    def find_post(self, post_id: str) -> Optional[Dict]:
        """Look up a post in the last fetched list"""
        for post in self.posts:
            if str(post.get('id')) == str(post_id):
                return post
        return None

    async def _enrich_post(self, post: Dict, semaphore: asyncio.Semaphore) -> Dict:
        """Resolve author summary, like count, comment count and viewer-like concurrently"""
        profile_query = self.supabase.table(Config.PROFILES_TABLE).select(
            'username, display_name, avatar_url'
        ).eq('user_id', post['user_id']).limit(1)

        lookups = [
            self._execute(profile_query, semaphore),
            self._count_rows(Config.LIKES_TABLE, post['id'], semaphore),
            self._count_rows(Config.COMMENTS_TABLE, post['id'], semaphore),
        ]
        if self.viewer_id:
            viewer_like_query = self.supabase.table(Config.LIKES_TABLE).select('id').eq(
                'post_id', post['id']
            ).eq(
                'user_id', self.viewer_id
            ).limit(1)
            lookups.append(self._execute(viewer_like_query, semaphore))

        results = await asyncio.gather(*lookups)
        profile_rows = rows(results[0])
        viewer_like_rows = rows(results[3]) if self.viewer_id else []

        return {
            **post,
            'profiles': profile_rows[0] if profile_rows else None,
            'likes_count': results[1],
            'comments_count': results[2],
            'is_liked': bool(viewer_like_rows)
        }

    async def _count_rows(self, table: str, post_id: str, semaphore: Optional[asyncio.Semaphore] = None) -> int:
        result = await self._execute(
            self.supabase.table(table).select('id').eq('post_id', post_id),
            semaphore
        )
        return len(rows(result))

    async def _execute(self, query, semaphore: Optional[asyncio.Semaphore] = None):
        """Run a blocking supabase query off the event loop, wrapping failures as StoreError"""
        try:
            if semaphore is None:
                return await asyncio.to_thread(query.execute)
            async with semaphore:
                return await asyncio.to_thread(query.execute)
        except BlogError:
            raise
        except Exception as e:
            raise StoreError(str(e)) from e

    def _failure(self, error: BlogError) -> MutationResult:
        self.logger.warning(f"Post mutation failed ({error.error_type}): {error.message}")
        return MutationResult(error=error.message, error_type=error.error_type)
