"""
Board Backend — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the failure cases services raise.
How:   Each exception carries a message and an optional context dict.
       A single global handler (registered in main.py) turns every BoardError
       into a response by inspecting its message text.
Who:   Raised by services and repositories; caught by the global handler.

Exception Hierarchy:
    BoardError (base)
    ├── NotFoundError        → message contains "not found" → 404
    ├── InvalidInputError    → 500 (message-based dispatch, see below)
    ├── FileStorageError     → 500
    └── DatabaseError        → 500

Status mapping:
    Clients of this API expect the status to be derived from the message:
    anything whose message contains "not found" is a 404, everything else a
    500. That is why InvalidInputError surfaces as 500 and not 400.
    `status_code_for` is the one place that rule lives.
"""

from typing import Any, Dict, Optional

NOT_FOUND_MARKER = "not found"


class BoardError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Client-facing error description
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(BoardError):
    """
    Raised when a referenced post or image does not exist.

    The message always reads "<Resource> not found" so that the boundary
    maps it to 404.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class InvalidInputError(BoardError):
    """Raised when a request carries a value outside the accepted domain."""

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class FileStorageError(BoardError):
    """Raised when reading or writing the image directory fails."""

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(BoardError):
    """
    Raised when a database operation fails unexpectedly.

    The message is generic; the original exception type goes into context
    and is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


def status_code_for(exc: BoardError) -> int:
    """Map an application error to an HTTP status by its message text."""
    if exc.message and NOT_FOUND_MARKER in exc.message:
        return 404
    return 500
