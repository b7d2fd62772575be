"""
Persistence boundary for the entry cleanup operation.

``EntryStore`` is the narrow interface ``CleanupService`` depends on.
Implementations must return blogs with fully materialised entry lists
(never a partial or lazily loaded collection) so that a cleanup scan
sees the complete title and content of every entry.

``SQLiteEntryStore`` implements it on top of a single SQLite
connection; the caller owns the connection and therefore the
transaction boundary.
"""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional

from ..models import Blog, Entry


class EntryStore(ABC):
    @abstractmethod
    def list_all_blogs_with_entries(self) -> List[Blog]:
        """Return every blog together with all of its entries."""

    @abstractmethod
    def get_blog_with_entries(self, blog_id: int) -> Optional[Blog]:
        """Return one blog with all of its entries, or ``None`` if absent."""

    @abstractmethod
    def delete_entry(self, entry_id: int, blog_id: int) -> int:
        """Delete the entry only if it belongs to ``blog_id``.

        Returns the number of rows removed: 1, or 0 when the pair does
        not match a live record.  Never raises for a missing entry.
        """


class SQLiteEntryStore(EntryStore):
    """``EntryStore`` backed by the ``blogs`` and ``entries`` tables."""

    _SELECT = """
        SELECT
            b.id AS blog_id,
            b.name AS blog_name,
            b.handle AS blog_handle,
            e.id AS entry_id,
            e.title AS entry_title,
            e.content AS entry_content,
            e.date AS entry_date
        FROM blogs AS b
        LEFT JOIN entries AS e ON e.blog_id = b.id
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def list_all_blogs_with_entries(self) -> List[Blog]:
        rows = self.conn.execute(self._SELECT + " ORDER BY b.id, e.id").fetchall()
        return self._rows_to_blogs(rows)

    def get_blog_with_entries(self, blog_id: int) -> Optional[Blog]:
        rows = self.conn.execute(
            self._SELECT + " WHERE b.id = ? ORDER BY e.id",
            (blog_id,),
        ).fetchall()
        blogs = self._rows_to_blogs(rows)
        return blogs[0] if blogs else None

    def delete_entry(self, entry_id: int, blog_id: int) -> int:
        cursor = self.conn.execute(
            "DELETE FROM entries WHERE id = ? AND blog_id = ?",
            (entry_id, blog_id),
        )
        return cursor.rowcount

    @staticmethod
    def _rows_to_blogs(rows: List[sqlite3.Row]) -> List[Blog]:
        """Fold joined blog/entry rows into blogs, keeping row order."""
        blogs: Dict[int, Blog] = {}
        for row in rows:
            blog = blogs.get(row["blog_id"])
            if blog is None:
                blog = Blog(id=row["blog_id"], name=row["blog_name"], handle=row["blog_handle"])
                blogs[blog.id] = blog
            # LEFT JOIN yields a single row with NULL entry columns for
            # a blog without entries.
            if row["entry_id"] is None:
                continue
            blog.entries.append(
                Entry(
                    id=row["entry_id"],
                    title=row["entry_title"],
                    content=row["entry_content"],
                    blog_id=blog.id,
                    date=parse_timestamp(row["entry_date"]),
                )
            )
        return list(blogs.values())


def parse_timestamp(value) -> Optional[datetime]:
    """Turn a stored ISO timestamp back into a ``datetime``."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
