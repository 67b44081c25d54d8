"""Create posts and comments tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `posts` and `comments` tables.
How:   Portable column types only, so the same migration runs on PostgreSQL
       and SQLite.

Rollback: downgrade() drops both tables (all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("category", sa.String(255), nullable=True),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default=sa.text("0")),
        # Client-supplied ISO 8601 string, not a server timestamp
        sa.Column("created_at", sa.String(255), nullable=True),
        sa.Column("image_url", sa.String(512), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # Backs GET /api/posts (ORDER BY created_at DESC)
    op.create_index(
        "idx_posts_created_at",
        "posts",
        [sa.text("created_at DESC")],
    )

    # No ON DELETE rule: comments are deleted explicitly before their post
    op.create_table(
        "comments",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("text", sa.Text(), nullable=True),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("created_at", sa.String(255), nullable=True),
        sa.Column("image_url", sa.String(512), nullable=True),
        sa.Column("post_id", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])


def downgrade() -> None:
    op.drop_index("idx_comments_post_id", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")
