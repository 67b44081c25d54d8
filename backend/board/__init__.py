"""
Board Backend — Application Package Initializer
================================================

What: Marks the `board` directory as a Python package.
Who:  Imported by uvicorn (`board.main:app`), Alembic, and pytest.

Architecture Note:
    The backend is layered:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (Business Rules)        │  ← vote bounds, not-found mapping
    ├─────────────────────────────────────┤
    │    Repositories (Storage Access)    │  ← CRUD + search per entity
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Images bypass the database entirely and live in a flat upload directory
    managed by the image service.
"""

__version__ = "1.0.0"
