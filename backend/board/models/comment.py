"""
Board Backend — Comment SQLAlchemy Model
=========================================

What:  ORM model representing the `comments` table.
Who:   Used by CommentRepository and reached through Post.comments.

A comment belongs to exactly one post through `post_id`. The foreign key
carries no ON DELETE rule: CommentRepository.delete_by_post_id removes a
post's comments before the post itself is deleted.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from board.database import Base

if TYPE_CHECKING:
    from board.models.post import Post


class Comment(Base):
    """A text reply owned by a single Post."""

    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    author: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)

    post_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("posts.id"),
        nullable=False,
    )

    # Relational back-reference only; response schemas never include it
    post: Mapped["Post"] = relationship(back_populates="comments")

    __table_args__ = (
        Index("idx_comments_post_id", "post_id"),
    )

    def __repr__(self) -> str:
        return f"<Comment(id={self.id!r}, post_id={self.post_id!r})>"
