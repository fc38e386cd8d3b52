"""
Notekeeper.

- core/: Configuration, logging, database sessions, exceptions
- models/: SQLAlchemy models
- repositories/: Data access for a single session
- services/: NoteStore, the per-operation facade over the notes table
- schemas/: Pydantic request/response schemas
- api/: Thin FastAPI surface
"""
