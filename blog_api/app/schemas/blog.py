"""
Pydantic models for blogs.

A blog has a display ``name`` and a short ``handle``.  Entries are
only embedded in ``BlogRead`` when a caller asks for them.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .entry import EntryRead


class BlogBase(BaseModel):
    name: str = Field(..., min_length=3, description="Display name of the blog")
    handle: str = Field(..., min_length=2, description="Short handle used in URLs")


class BlogCreate(BlogBase):
    """Schema for creating a blog."""

    id: Optional[int] = None


class BlogUpdate(BlogBase):
    """Schema for replacing an existing blog."""

    id: Optional[int] = None


class BlogRead(BlogBase):
    """Schema for reading a blog from the API."""

    id: int
    entries: Optional[List[EntryRead]] = None

    model_config = {
        "from_attributes": True,
    }
