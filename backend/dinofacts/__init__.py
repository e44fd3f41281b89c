"""
Dinosaur Facts Backend — Application Package Initializer
=========================================================

What: Marks the `dinofacts` directory as a Python package.
Why:  Enables module imports like `from dinofacts.config import settings`.
Who:  Used by uvicorn, pytest, and the `dinofacts` console script.

Architecture Note:
    The backend is a thin read-only layer over a hosted database table:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status mapping, JSON bodies
    ├─────────────────────────────────────┤
    │      FactService (Query Handler)    │  ← list / search, explicit results
    ├─────────────────────────────────────┤
    │      RecordStore (Store Adapter)    │  ← async SQLAlchemy queries
    ├─────────────────────────────────────┤
    │     Hosted PostgreSQL (external)    │  ← owns the dinosaur_facts table
    └─────────────────────────────────────┘

    Nothing here writes to the database. The schema, the rows and their
    lifecycle belong to the managed database service.
"""

__version__ = "1.0.0"
