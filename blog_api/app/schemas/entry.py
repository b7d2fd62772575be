"""
Pydantic models for blog entries.

``EntryBase`` carries the writable fields.  ``EntryCreate`` and
``EntryUpdate`` both accept an optional ``id`` so the endpoints can
reject a create that already has one and an update that lacks one
with a proper error key instead of a generic validation failure.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class EntryBase(BaseModel):
    title: str = Field(..., description="Entry title")
    content: str = Field(..., description="Entry body text")
    date: Optional[datetime] = Field(None, description="Publication time; defaults to the time of creation")
    blog_id: int = Field(..., description="ID of the blog the entry belongs to")


class EntryCreate(EntryBase):
    """Schema for creating an entry."""

    id: Optional[int] = None


class EntryUpdate(EntryBase):
    """Schema for replacing an existing entry."""

    id: Optional[int] = None


class EntryRead(EntryBase):
    """Schema for reading an entry from the API."""

    id: int
    date: datetime

    model_config = {
        "from_attributes": True,
    }
