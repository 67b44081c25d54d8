"""
Board Backend — Post SQLAlchemy Model
======================================

What:  ORM model representing the `posts` table.
Who:   Used by PostRepository for CRUD and search, and by Alembic.

Table Design:
    - id: opaque string primary key. Clients usually send a UUID they
      generated; the repository fills in a UUID4 when it is missing.
    - created_at: an opaque client-supplied string (ISO 8601 in practice),
      not a server timestamp. Lexicographic order on ISO strings matches
      chronological order, which is what the listing relies on.
    - upvotes: changed only by the vote operation.

    Index on created_at DESC backs the default listing order.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from board.database import Base

if TYPE_CHECKING:
    from board.models.comment import Comment


class Post(Base):
    """
    A user-authored submission with a vote counter and attached comments.

    Lifecycle:
        1. Created via POST /api/posts (upvotes = 0 unless supplied)
        2. title/content replaced via PUT, upvotes moved via PATCH .../vote
        3. Deleted via DELETE; its comments are deleted first
    """

    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)

    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    author: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    upvotes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    created_at: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Retrieval path returned by POST /api/images/upload
    image_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)

    # selectin: async sessions cannot lazy-load, so comments are fetched
    # together with their posts in one extra IN query
    comments: Mapped[List["Comment"]] = relationship(
        back_populates="post",
        lazy="selectin",
        order_by="Comment.created_at",
    )

    __table_args__ = (
        Index("idx_posts_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id!r}, title={self.title!r}, upvotes={self.upvotes})>"
