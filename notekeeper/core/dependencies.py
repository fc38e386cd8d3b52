"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header

from notekeeper.core.config import get_app_config
from notekeeper.core.database import get_session_factory
from notekeeper.services.note import NoteStore


async def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """
    Extract or generate request ID from headers.

    Used for request tracing and correlation.
    """
    return x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


def get_note_store() -> NoteStore:
    """
    Provide a NoteStore bound to the application session factory.

    The store opens a fresh session per operation, so one instance per
    request is enough.
    """
    notes_config = get_app_config().application.notes
    return NoteStore(
        get_session_factory(),
        strict_writes=notes_config.strict_writes,
    )


NoteStoreDep = Annotated[NoteStore, Depends(get_note_store)]
