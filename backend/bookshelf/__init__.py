"""
Bookshelf API — Application Package Initializer
================================================

What: Marks the `bookshelf` directory as a Python package.
Why:  Enables module imports like `from bookshelf.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend follows the same layered shape for every resource kind:

    ┌─────────────────────────────────────┐
    │      Routes (resource routers)      │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (resource lifecycle)   │  ← lookup, ownership, result matching
    ├─────────────────────────────────────┤
    │        Document store (results)     │  ← find / create / update / delete
    ├─────────────────────────────────────┤
    │        Database (persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Authors and books are two instances of the same lifecycle; adding a kind
    means declaring its schemas and a ResourceKind, not writing new routes.
"""

__version__ = "1.0.0"
