"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.models.note import Note
from notekeeper.repositories.base import BaseRepository

# Newest first; id breaks ties between equal timestamps so that
# consecutive pages never overlap or skip a row.
NEWEST_FIRST = (Note.created_at.desc(), Note.id.desc())


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits standard CRUD operations from BaseRepository
    and adds note-specific queries.
    """

    model = Note

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_page(
        self,
        limit: int,
        offset: int,
    ) -> list[Note]:
        """
        Get one page of notes, newest first.

        Args:
            limit: Maximum number of notes to return
            offset: Number of notes to skip

        Returns:
            List of notes
        """
        result = await self.session.execute(
            select(Note)
            .order_by(*NEWEST_FIRST)
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def get_all_newest_first(self) -> list[Note]:
        """Get every note, newest first."""
        result = await self.session.execute(
            select(Note).order_by(*NEWEST_FIRST)
        )
        return list(result.scalars().all())
