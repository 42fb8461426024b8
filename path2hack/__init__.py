"""
Path2Hack Backend: Application Package
=======================================

What: Marks the `path2hack` directory as a Python package.
Who:  Imported by uvicorn (`path2hack.main:app`), Alembic, and pytest.

Architecture Note:
    The backend is a thin integration layer, laid out in the usual layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Prompts, scraping, inserts
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Outbound collaborators (Gemini, GitHub, arbitrary web pages) live behind
    service classes so routes never talk to them directly.
"""

__version__ = "1.0.0"
