"""
Board Backend — Pydantic Request/Response Schemas
==================================================

What:  Pydantic models defining the API contract between frontend and backend.
How:   FastAPI validates request bodies against these models and serializes
       responses through them (by alias, so JSON keys are camelCase).
Who:   Used by route handlers and services.

Wire format:
    The frontend speaks camelCase (`createdAt`, `imageUrl`). Every model uses
    a camelCase alias generator with populate_by_name, so both `createdAt`
    and `created_at` are accepted on input and `createdAt` is emitted.

    Unknown input keys are ignored. In particular a `comments` array sent
    along with a new post is dropped; comments are only created through
    POST /api/posts/{postId}/comments.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every wire model: camelCase aliases, ORM attribute reading."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Comments
# ══════════════════════════════════════════════════════════════════════════


class CommentCreate(CamelModel):
    """Body of POST /api/posts/{postId}/comments. Every field is optional."""

    id: Optional[str] = Field(default=None, description="Client-generated id; assigned when absent")
    text: Optional[str] = None
    author: Optional[str] = None
    created_at: Optional[str] = Field(default=None, description="Client timestamp (opaque string)")
    image_url: Optional[str] = Field(default=None, description="Path from POST /api/images/upload")


class CommentResponse(CamelModel):
    """A comment as returned to clients; the owning post is never included."""

    id: str
    text: Optional[str] = None
    author: Optional[str] = None
    created_at: Optional[str] = None
    image_url: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Posts
# ══════════════════════════════════════════════════════════════════════════


class PostCreate(CamelModel):
    """
    Body of POST /api/posts.

    Any subset of fields may be sent; unset fields take their type defaults
    (None for text, 0 for upvotes).
    """

    id: Optional[str] = Field(default=None, description="Client-generated id; assigned when absent")
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    upvotes: int = 0
    created_at: Optional[str] = None
    image_url: Optional[str] = None


class PostUpdate(CamelModel):
    """Body of PUT /api/posts/{id}. Both fields are written as given."""

    title: Optional[str] = None
    content: Optional[str] = None


class PostResponse(CamelModel):
    """Full representation of a post, comments included."""

    id: str
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    upvotes: int = 0
    created_at: Optional[str] = None
    image_url: Optional[str] = None
    comments: List[CommentResponse] = Field(default_factory=list)


# ══════════════════════════════════════════════════════════════════════════
# Error & Health
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error envelope returned for every failed request.

    Example:
        {
            "error": "not_found",
            "message": "Post not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
