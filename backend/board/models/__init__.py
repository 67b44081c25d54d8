# Models package init
"""
Importing this package registers every ORM model on `Base.metadata`.
"""

from board.models.post import Post
from board.models.comment import Comment

__all__ = ["Post", "Comment"]
