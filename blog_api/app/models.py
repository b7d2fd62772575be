"""
Plain records for blogs and entries.

These are what the service layer works with.  A ``Blog`` loaded from
an ``EntryStore`` always carries its complete list of entries; there is
no lazy loading.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Entry:
    id: int
    title: str
    content: str
    blog_id: int
    date: Optional[datetime] = None


@dataclass
class Blog:
    id: int
    name: str
    handle: str
    entries: List[Entry] = field(default_factory=list)
