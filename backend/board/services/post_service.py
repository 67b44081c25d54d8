"""
Board Backend — Post Service (Business Logic)
==============================================

What:  The post and comment operations exposed by /api/posts.
How:   Builds session-bound repositories per call, applies the business
       rules, and returns response schemas.
Who:   Called by the posts route handlers.

Business rules enforced here:
    - A vote is exactly +1 or -1; anything else is rejected before the
      database is touched.
    - Update, vote, comment and lookup on an unknown post raise
      NotFoundError ("Post not found").
    - Deleting a post removes its comments first, then the post. Unknown
      ids are a no-op.

Error Recovery:
    Services only raise; the request's session dependency rolls back on any
    exception, so a failed call persists nothing.

The service is stateless and receives the session on every call.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from board.exceptions import InvalidInputError, NotFoundError
from board.models.comment import Comment
from board.models.post import Post
from board.repositories import CommentRepository, PostRepository
from board.schemas.post import (
    CommentCreate,
    CommentResponse,
    PostCreate,
    PostResponse,
    PostUpdate,
)

logger = logging.getLogger(__name__)

ALLOWED_VOTE_VALUES = (1, -1)


class PostService:
    """
    Business logic layer for posts and their comments.

    Responsibilities:
        - list_posts() / search_posts() / get_post(): reads
        - create_post() / update_post() / delete_post(): post lifecycle
        - add_comment(): attach a comment to an existing post
        - vote(): move the upvote counter by one
    """

    async def list_posts(self, db: AsyncSession) -> List[PostResponse]:
        """All posts, newest `createdAt` first."""
        logger.info("Fetching all posts sorted by creation date")
        posts = await PostRepository(db).find_all(newest_first=True)
        return [PostResponse.model_validate(post) for post in posts]

    async def search_posts(self, db: AsyncSession, query: str) -> List[PostResponse]:
        """Posts whose title or content contains `query`, case-insensitively."""
        logger.info("Searching posts for %r", query)
        posts = await PostRepository(db).search(query)
        return [PostResponse.model_validate(post) for post in posts]

    async def get_post(self, db: AsyncSession, post_id: str) -> PostResponse:
        post = await self._require_post(db, post_id)
        return PostResponse.model_validate(post)

    async def create_post(self, db: AsyncSession, payload: PostCreate) -> PostResponse:
        """
        Persist a caller-supplied post.

        When the payload carries the id of an existing post, that post's
        fields are overwritten and its comments stay attached (save
        semantics). Otherwise a new post is inserted, with a generated id
        if none was sent.
        """
        logger.info("Adding new post with title: %s", payload.title)
        repo = PostRepository(db)
        fields = payload.model_dump()

        existing = await repo.find_by_id(payload.id) if payload.id else None
        if existing is not None:
            for name, value in fields.items():
                setattr(existing, name, value)
            post = await repo.save(existing)
        else:
            post = await repo.save(Post(**fields, comments=[]))

        return PostResponse.model_validate(post)

    async def update_post(
        self, db: AsyncSession, post_id: str, payload: PostUpdate
    ) -> PostResponse:
        """Overwrite exactly title and content of an existing post."""
        logger.info("Updating post with id: %s", post_id)
        post = await self._require_post(db, post_id)
        post.title = payload.title
        post.content = payload.content
        post = await PostRepository(db).save(post)
        return PostResponse.model_validate(post)

    async def delete_post(self, db: AsyncSession, post_id: str) -> None:
        """Delete a post and its comments. Unknown ids are ignored."""
        logger.info("Deleting post with id: %s", post_id)
        await CommentRepository(db).delete_by_post_id(post_id)
        await PostRepository(db).delete_by_id(post_id)

    async def add_comment(
        self, db: AsyncSession, post_id: str, payload: CommentCreate
    ) -> CommentResponse:
        """Attach a new comment to an existing post."""
        logger.info("Adding comment to post id: %s", post_id)
        post = await self._require_post(db, post_id)

        comment = Comment(**payload.model_dump())
        comment.post = post
        comment = await CommentRepository(db).save(comment)
        return CommentResponse.model_validate(comment)

    async def vote(self, db: AsyncSession, post_id: str, value: int) -> PostResponse:
        """
        Add +1 or -1 to a post's upvotes.

        Read-modify-write: two concurrent votes on the same post may
        overwrite each other.

        Raises:
            InvalidInputError: value is not exactly 1 or -1 (no DB access)
            NotFoundError: no post with this id
        """
        logger.info("Voting on post id: %s with value: %s", post_id, value)
        if value not in ALLOWED_VOTE_VALUES:
            raise InvalidInputError(
                message="Vote value must be 1 or -1",
                field="value",
                context={"value": value},
            )

        post = await self._require_post(db, post_id)
        post.upvotes = (post.upvotes or 0) + value
        post = await PostRepository(db).save(post)
        return PostResponse.model_validate(post)

    async def _require_post(self, db: AsyncSession, post_id: str) -> Post:
        post = await PostRepository(db).find_by_id(post_id)
        if post is None:
            logger.error("Post with id %s not found", post_id)
            raise NotFoundError(resource="Post", resource_id=post_id)
        return post


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
