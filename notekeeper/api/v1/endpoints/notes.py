"""
Notes API Endpoints.

REST API endpoints over NoteStore.
"""

from typing import Any

from fastapi import APIRouter, Query

from notekeeper.core.config import get_app_config
from notekeeper.core.dependencies import NoteStoreDep, RequestId
from notekeeper.core.exceptions import NotFoundError
from notekeeper.schemas.base import (
    ApiResponse,
    PaginatedResponse,
    PaginationInfo,
    ResponseMetadata,
)
from notekeeper.schemas.note import NoteCreate, NoteResponse, NoteUpdate

router = APIRouter()


def _page_size(requested: int | None) -> int:
    """Apply the configured default and ceiling to a requested page size."""
    pagination = get_app_config().application.pagination
    if requested is None:
        return pagination.default_page_size
    return min(requested, pagination.max_page_size)


@router.get(
    "",
    summary="List notes (paginated)",
    description="Get one page of notes, newest first, with the total count.",
)
async def list_notes(
    store: NoteStoreDep,
    request_id: RequestId,
    page: int = Query(default=1, ge=1, description="1-based page number"),
    page_size: int | None = Query(default=None, ge=1, description="Notes per page"),
) -> dict[str, Any]:
    """List notes page by page."""
    size = _page_size(page_size)
    notes = await store.list_page(page, size)
    total = await store.count()

    response = PaginatedResponse[NoteResponse](
        data=[NoteResponse.model_validate(note) for note in notes],
        pagination=PaginationInfo(
            total=total,
            page=page,
            page_size=size,
            has_more=(page - 1) * size + len(notes) < total,
        ),
        metadata=ResponseMetadata(request_id=request_id),
    )
    return response.model_dump(mode="json")


@router.get(
    "/search",
    response_model=ApiResponse[list[NoteResponse]],
    summary="Search notes",
    description="Case-insensitive substring search over title and text.",
)
async def search_notes(
    store: NoteStoreDep,
    request_id: RequestId,
    q: str = Query(default="", description="Search term; empty matches all"),
) -> ApiResponse[list[NoteResponse]]:
    """Search notes by title and text."""
    notes = await store.search(q)
    return ApiResponse(
        data=[NoteResponse.model_validate(note) for note in notes],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/count",
    response_model=ApiResponse[int],
    summary="Count notes",
)
async def count_notes(
    store: NoteStoreDep,
    request_id: RequestId,
) -> ApiResponse[int]:
    """Get the total number of notes."""
    return ApiResponse(
        data=await store.count(),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Get a note",
)
async def get_note(
    note_id: int,
    store: NoteStoreDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Get a note by ID."""
    note = await store.get_by_id(note_id)
    if note is None:
        raise NotFoundError("Note not found")
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "",
    response_model=ApiResponse[NoteResponse],
    status_code=201,
    summary="Create a note",
)
async def create_note(
    data: NoteCreate,
    store: NoteStoreDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Create a new note."""
    note = await store.create(data)
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.put(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Update a note",
    description="Replace title and text. A missing note is not an error; data is null.",
)
async def update_note(
    note_id: int,
    data: NoteUpdate,
    store: NoteStoreDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Update a note."""
    note = await store.update(note_id, data)
    return ApiResponse(
        data=NoteResponse.model_validate(note) if note is not None else None,
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{note_id}",
    status_code=204,
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    store: NoteStoreDep,
) -> None:
    """Delete a note."""
    await store.delete(note_id)
