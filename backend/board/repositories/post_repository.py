"""
Board Backend — Post Repository
================================

What:  Storage operations for Post records.
Who:   Called by PostService; never by routes directly.

Query patterns:
    - Newest first: SELECT ... ORDER BY created_at DESC
      → idx_posts_created_at
    - Search: SELECT ... WHERE lower(title) LIKE lower(:q) OR lower(content) LIKE lower(:q)
      → full scan; autoescape makes '%' and '_' in the query literal
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from board.exceptions import DatabaseError
from board.models.post import Post

logger = logging.getLogger(__name__)


class PostRepository:
    """CRUD and search over the `posts` table, bound to one session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self, newest_first: bool = False) -> List[Post]:
        """Return every post, optionally ordered by created_at descending."""
        query = select(Post)
        if newest_first:
            query = query.order_by(Post.created_at.desc())
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            logger.error("Failed to list posts: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "find_all", "error_type": type(e).__name__})
        return list(result.scalars().all())

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        try:
            return await self.session.get(Post, post_id)
        except SQLAlchemyError as e:
            logger.error("Failed to fetch post %s: %s", post_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "find_by_id", "post_id": post_id})

    async def search(self, query: str) -> List[Post]:
        """
        Posts whose title or content contains `query`, ignoring case.

        An empty query is a substring of every string, so it returns all
        posts, including those whose title and content are both NULL.
        """
        if not query:
            return await self.find_all()

        statement = select(Post).where(
            or_(
                Post.title.icontains(query, autoescape=True),
                Post.content.icontains(query, autoescape=True),
            )
        )
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            logger.error("Post search failed for %r: %s", query, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "search", "error_type": type(e).__name__})
        return list(result.scalars().all())

    async def save(self, post: Post) -> Post:
        """
        Persist a new or modified post and flush it.

        A post without an id gets a UUID4 string. The transaction itself is
        committed by the request's session dependency.
        """
        if not post.id:
            post.id = str(uuid.uuid4())
        try:
            self.session.add(post)
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to save post %s: %s", post.id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "save", "post_id": post.id})
        return post

    async def delete_by_id(self, post_id: str) -> None:
        """Delete the post row. Comments must already be gone."""
        try:
            await self.session.execute(delete(Post).where(Post.id == post_id))
        except SQLAlchemyError as e:
            logger.error("Failed to delete post %s: %s", post_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "delete_by_id", "post_id": post_id})
