"""
Board Backend — Post Route Handlers
====================================

What:  HTTP surface for posts, comments and votes under /api/posts.
How:   Extracts path/query/body data, delegates to PostService.
Who:   Called by the frontend PostContext.

Every successful call answers 200, creations included, since the frontend
only checks `response.ok`.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from board.database import get_db_session
from board.schemas.post import (
    CommentCreate,
    CommentResponse,
    ErrorResponse,
    PostCreate,
    PostResponse,
    PostUpdate,
)
from board.services.post_service import post_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["Posts"])


@router.get(
    "",
    response_model=List[PostResponse],
    summary="List all posts, newest first",
)
async def list_posts(db: AsyncSession = Depends(get_db_session)) -> List[PostResponse]:
    return await post_service.list_posts(db)


# Declared before /{post_id} so "search" is never captured as an id
@router.get(
    "/search",
    response_model=List[PostResponse],
    summary="Search posts by title or content",
    description="Case-insensitive substring match on title OR content. An empty query matches every post.",
)
async def search_posts(
    query: str = Query(..., description="Substring to look for"),
    db: AsyncSession = Depends(get_db_session),
) -> List[PostResponse]:
    return await post_service.search_posts(db, query)


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={404: {"description": "Post not found", "model": ErrorResponse}},
    summary="Get a single post",
)
async def get_post(post_id: str, db: AsyncSession = Depends(get_db_session)) -> PostResponse:
    return await post_service.get_post(db, post_id)


@router.post(
    "",
    response_model=PostResponse,
    summary="Create a post",
)
async def create_post(
    payload: PostCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    return await post_service.create_post(db, payload)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    responses={404: {"description": "Post not found", "model": ErrorResponse}},
    summary="Replace a post's title and content",
)
async def update_post(
    post_id: str,
    payload: PostUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    return await post_service.update_post(db, post_id, payload)


@router.delete(
    "/{post_id}",
    status_code=200,
    summary="Delete a post and its comments",
    description="Idempotent: deleting an unknown id succeeds.",
)
async def delete_post(post_id: str, db: AsyncSession = Depends(get_db_session)) -> None:
    await post_service.delete_post(db, post_id)


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    responses={404: {"description": "Post not found", "model": ErrorResponse}},
    summary="Add a comment to a post",
)
async def add_comment(
    post_id: str,
    payload: CommentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CommentResponse:
    return await post_service.add_comment(db, post_id, payload)


@router.patch(
    "/{post_id}/vote",
    response_model=PostResponse,
    responses={
        404: {"description": "Post not found", "model": ErrorResponse},
        500: {"description": "Vote value other than 1 or -1", "model": ErrorResponse},
    },
    summary="Upvote (+1) or downvote (-1) a post",
)
async def vote_post(
    post_id: str,
    value: int = Query(..., description="1 to upvote, -1 to downvote"),
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    return await post_service.vote(db, post_id, value)
