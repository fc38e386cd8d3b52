"""
Note Schemas.

Pydantic schemas for note input and output. Emptiness of title and text
is checked by NoteStore, not here, so that every caller gets the same
ValidationError whether or not it goes through the HTTP layer.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str = Field(
        ...,
        description="Note title",
        examples=["Groceries"],
    )
    text: str = Field(
        ...,
        description="Note body",
        examples=["Milk, eggs, bread."],
    )


class NoteUpdate(BaseModel):
    """Schema for replacing the title and text of an existing note."""

    title: str = Field(..., description="New note title")
    text: str = Field(..., description="New note body")


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: int = Field(description="Note identifier")
    title: str = Field(description="Note title")
    text: str = Field(description="Note body")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last update timestamp (UTC)")

    model_config = ConfigDict(from_attributes=True)
