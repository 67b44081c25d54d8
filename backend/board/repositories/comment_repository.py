"""
Board Backend — Comment Repository
===================================

What:  Storage operations for Comment records.
Who:   Called by PostService when comments are added or a post is deleted.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from board.exceptions import DatabaseError
from board.models.comment import Comment

logger = logging.getLogger(__name__)


class CommentRepository:
    """CRUD over the `comments` table, bound to one session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        try:
            return await self.session.get(Comment, comment_id)
        except SQLAlchemyError as e:
            logger.error("Failed to fetch comment %s: %s", comment_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "find_by_id", "comment_id": comment_id})

    async def find_by_post_id(self, post_id: str) -> List[Comment]:
        statement = (
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at)
        )
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            logger.error("Failed to list comments of post %s: %s", post_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "find_by_post_id", "post_id": post_id})
        return list(result.scalars().all())

    async def save(self, comment: Comment) -> Comment:
        if not comment.id:
            comment.id = str(uuid.uuid4())
        try:
            self.session.add(comment)
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to save comment %s: %s", comment.id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "save", "comment_id": comment.id})
        return comment

    async def find_all(self) -> List[Comment]:
        try:
            result = await self.session.execute(select(Comment))
        except SQLAlchemyError as e:
            logger.error("Failed to list comments: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "find_all", "error_type": type(e).__name__})
        return list(result.scalars().all())

    async def delete_by_post_id(self, post_id: str) -> None:
        """Delete every comment attached to `post_id`; first half of a post delete."""
        try:
            await self.session.execute(delete(Comment).where(Comment.post_id == post_id))
        except SQLAlchemyError as e:
            logger.error("Failed to delete comments of post %s: %s", post_id, str(e), exc_info=True)
            raise DatabaseError(context={"operation": "delete_by_post_id", "post_id": post_id})
