"""
Notes API — Application Package Initializer
============================================

What: Marks the `notes_api` directory as a Python package.
Why:  Enables module imports like `from notes_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The service is a thin layered CRUD backend:

    ┌─────────────────────────────────────┐
    │        Routes (Request Handler)     │  ← HTTP verbs and status codes only
    ├─────────────────────────────────────┤
    │         Services (Note Service)     │  ← Validation, result envelopes
    ├─────────────────────────────────────┤
    │     Repositories (Document Store)   │  ← find_all / find_by_id / save / delete_by_id
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the session directly and the service never sees HTTP:
    the service returns a ServiceSuccess or ServiceFailure and the route picks
    the status code.
"""

__version__ = "1.0.0"
