"""
Note Store.

Business logic layer for notes. Every operation runs in its own session
scope, so a NoteStore holds no per-request state and can be shared by
concurrent callers.

Failure policy:
    create          - backend errors are logged and raised as DatabaseError
    update / delete - backend errors are logged and swallowed, unless the
                      store was built with strict_writes=True
    any write       - empty title or text raises ValidationError before
                      the backend is touched
"""

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notekeeper.core.exceptions import DatabaseError
from notekeeper.core.utils import utc_now, utc_now_after
from notekeeper.models.note import Note
from notekeeper.repositories.note import NoteRepository
from notekeeper.schemas.note import NoteCreate, NoteUpdate
from notekeeper.services.base import BaseService

REQUIRED_FIELDS = ["title", "text"]


class NoteStore(BaseService):
    """
    Facade over the notes table.

    Handles paging, search, timestamps and validation that the
    database does not enforce on its own.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        strict_writes: bool = False,
    ) -> None:
        super().__init__(session_factory)
        self.strict_writes = strict_writes

    async def list_page(self, page_number: int, page_size: int) -> list[Note]:
        """
        Get one page of notes, newest first.

        Page number and size below 1 are treated as 1. A page past the
        end is empty rather than an error.

        Args:
            page_number: 1-based page index
            page_size: Notes per page

        Returns:
            List of notes on the page
        """
        page_number = max(page_number, 1)
        page_size = max(page_size, 1)
        offset = (page_number - 1) * page_size

        self._log_debug("Listing notes", page=page_number, page_size=page_size)
        return await self._execute_db_operation(
            "list_notes",
            self._fetch_page(page_size, offset),
        )

    async def search(self, term: str) -> list[Note]:
        """
        Find notes whose title or text contains ``term``, ignoring case.

        Matching is done here rather than in SQL so that case folding does
        not depend on the database collation. An empty term matches every
        note.

        Returns:
            Matching notes, newest first
        """
        self._log_debug("Searching notes", term=term)
        notes = await self._execute_db_operation(
            "search_notes",
            self._fetch_all(),
        )
        needle = term.casefold()
        return [
            note for note in notes
            if needle in note.title.casefold() or needle in note.text.casefold()
        ]

    async def count(self) -> int:
        """Get the total number of notes."""
        return await self._execute_db_operation("count_notes", self._count())

    async def get_by_id(self, note_id: int) -> Note | None:
        """
        Get a note by ID.

        Returns:
            Note if found, None otherwise
        """
        return await self._execute_db_operation(
            "get_note",
            self._fetch_one(note_id),
        )

    async def create(self, data: NoteCreate) -> Note:
        """
        Create a new note.

        Both timestamps are set to the same current UTC instant.

        Args:
            data: Note creation data

        Returns:
            Created note with its generated ID

        Raises:
            ValidationError: If title or text is empty
            DatabaseError: If the note could not be stored
        """
        self._validate_required(data.model_dump(), REQUIRED_FIELDS)
        self._log_operation("Creating note", title=data.title)

        timestamp = utc_now()
        note = await self._execute_db_operation(
            "create_note",
            self._insert(data, timestamp),
        )

        self._log_debug("Note created", note_id=note.id)
        return note

    async def update(self, note_id: int, data: NoteUpdate) -> Note | None:
        """
        Replace the title and text of an existing note.

        A missing note is not an error; the call does nothing. Backend
        failures are logged and the call returns None.

        Args:
            note_id: Note ID to update
            data: Replacement title and text

        Returns:
            Updated note, or None if nothing was written

        Raises:
            ValidationError: If title or text is empty
            DatabaseError: Only when strict_writes is enabled
        """
        self._validate_required(data.model_dump(), REQUIRED_FIELDS)
        self._log_operation("Updating note", note_id=note_id)

        try:
            note = await self._execute_db_operation(
                "update_note",
                self._apply_update(note_id, data),
            )
        except DatabaseError:
            if self.strict_writes:
                raise
            self._logger.error(
                "Note update discarded after database error",
                extra={"note_id": note_id},
            )
            return None

        if note is None:
            self._logger.warning("Note to update not found", extra={"note_id": note_id})
        return note

    async def delete(self, note_id: int) -> None:
        """
        Permanently delete a note.

        Deleting a missing note does nothing. Backend failures are logged
        and swallowed.

        Raises:
            DatabaseError: Only when strict_writes is enabled
        """
        self._log_operation("Deleting note", note_id=note_id)

        try:
            deleted = await self._execute_db_operation(
                "delete_note",
                self._remove(note_id),
            )
        except DatabaseError:
            if self.strict_writes:
                raise
            self._logger.error(
                "Note delete discarded after database error",
                extra={"note_id": note_id},
            )
            return

        if not deleted:
            self._log_debug("Note to delete not found", note_id=note_id)

    # -------------------------------------------------------------------------
    # Units of work, one session each
    # -------------------------------------------------------------------------

    async def _fetch_page(self, limit: int, offset: int) -> list[Note]:
        async with self.session_scope() as session:
            return await NoteRepository(session).get_page(limit=limit, offset=offset)

    async def _fetch_all(self) -> list[Note]:
        async with self.session_scope() as session:
            return await NoteRepository(session).get_all_newest_first()

    async def _count(self) -> int:
        async with self.session_scope() as session:
            return await NoteRepository(session).count()

    async def _fetch_one(self, note_id: int) -> Note | None:
        async with self.session_scope() as session:
            return await NoteRepository(session).get_by_id_or_none(note_id)

    async def _insert(self, data: NoteCreate, timestamp: datetime) -> Note:
        async with self.session_scope() as session:
            return await NoteRepository(session).create(
                title=data.title,
                text=data.text,
                created_at=timestamp,
                updated_at=timestamp,
            )

    async def _apply_update(self, note_id: int, data: NoteUpdate) -> Note | None:
        async with self.session_scope() as session:
            repo = NoteRepository(session)
            note = await repo.get_by_id_or_none(note_id)
            if note is None:
                return None
            return await repo.update(
                note,
                title=data.title,
                text=data.text,
                updated_at=utc_now_after(note.updated_at),
            )

    async def _remove(self, note_id: int) -> bool:
        async with self.session_scope() as session:
            repo = NoteRepository(session)
            note = await repo.get_by_id_or_none(note_id)
            if note is None:
                return False
            await repo.delete(note)
            return True
