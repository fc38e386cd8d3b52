"""
Note Model.

Database model for notes, the only entity in the service.
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.models.base import Base, IntegerIdMixin, TimestampMixin


class Note(IntegerIdMixin, TimestampMixin, Base):
    """
    Note database model.

    A short text note with a title and a body. Rows are removed
    permanently on delete.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
