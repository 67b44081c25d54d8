# Repositories package init
"""
Board Backend — Storage Access Layer
=====================================

What:  One small repository per entity wrapping an AsyncSession.
How:   Each repository exposes find_all / find_by_id / save plus the
       entity's delete and custom queries, and translates SQLAlchemy failures
       into DatabaseError.

Repository Inventory:
    - PostRepository:    CRUD, newest-first listing, substring search
    - CommentRepository: CRUD, lookup and bulk delete by owning post

Repositories are cheap and session-bound: services build them per call
from the request's session rather than holding them as singletons.
"""

from board.repositories.post_repository import PostRepository
from board.repositories.comment_repository import CommentRepository

__all__ = ["PostRepository", "CommentRepository"]
