"""
Business logic for blog entries.

An entry always references an existing blog; ``create_entry`` and
``update_entry`` raise ``NotFoundError`` for an unknown ``blog_id``.
Entry dates are stored as ISO 8601 strings.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from typing import List, Optional

from ..core.errors import NotFoundError
from ..schemas.entry import EntryCreate, EntryRead, EntryUpdate
from .audit_service import AuditService
from .blog_service import BlogService
from .entry_store import parse_timestamp

logger = logging.getLogger(__name__)


class EntryService:
    """Service for managing entries."""

    @classmethod
    async def create_entry(cls, conn: sqlite3.Connection, data: EntryCreate) -> EntryRead:
        if not await BlogService.exists(conn, data.blog_id):
            raise NotFoundError("blog", data.blog_id)
        date = data.date or datetime.now(timezone.utc)
        cursor = conn.execute(
            """
            INSERT INTO entries (title, content, date, blog_id)
            VALUES (?, ?, ?, ?)
            """,
            (data.title, data.content, date.isoformat(), data.blog_id),
        )
        entry_id = cursor.lastrowid
        logger.info("Created entry %s in blog %s", entry_id, data.blog_id)
        await AuditService.log(
            conn,
            action="create",
            object_type="entry",
            object_id=entry_id,
            details={"blog_id": data.blog_id, "title": data.title},
        )
        return EntryRead(
            id=entry_id,
            title=data.title,
            content=data.content,
            date=date,
            blog_id=data.blog_id,
        )

    @classmethod
    async def update_entry(cls, conn: sqlite3.Connection, data: EntryUpdate) -> Optional[EntryRead]:
        """Replace an existing entry.

        Returns ``None`` if no entry with ``data.id`` exists.  Moving
        an entry to another blog is allowed as long as that blog exists.
        """
        if not await BlogService.exists(conn, data.blog_id):
            raise NotFoundError("blog", data.blog_id)
        current = await cls.get_entry(conn, data.id)
        if current is None:
            return None
        date = data.date or current.date
        conn.execute(
            """
            UPDATE entries
            SET title = ?, content = ?, date = ?, blog_id = ?
            WHERE id = ?
            """,
            (data.title, data.content, date.isoformat(), data.blog_id, data.id),
        )
        logger.info("Updated entry %s", data.id)
        await AuditService.log(
            conn,
            action="update",
            object_type="entry",
            object_id=data.id,
            details={"blog_id": data.blog_id, "title": data.title},
        )
        return EntryRead(
            id=data.id,
            title=data.title,
            content=data.content,
            date=date,
            blog_id=data.blog_id,
        )

    @classmethod
    async def list_entries(
        cls,
        conn: sqlite3.Connection,
        blog_id: Optional[int] = None,
    ) -> List[EntryRead]:
        """Return entries ordered by id, optionally only those of one blog."""
        query = "SELECT id, title, content, date, blog_id FROM entries"
        params: list = []
        if blog_id is not None:
            query += " WHERE blog_id = ?"
            params.append(blog_id)
        query += " ORDER BY id"
        rows = conn.execute(query, tuple(params)).fetchall()
        return [cls._row_to_entry_read(row) for row in rows]

    @classmethod
    async def get_entry(cls, conn: sqlite3.Connection, entry_id: int) -> Optional[EntryRead]:
        row = conn.execute(
            "SELECT id, title, content, date, blog_id FROM entries WHERE id = ?",
            (entry_id,),
        ).fetchone()
        if not row:
            return None
        return cls._row_to_entry_read(row)

    @classmethod
    async def delete_entry(cls, conn: sqlite3.Connection, entry_id: int) -> bool:
        cursor = conn.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
        affected = cursor.rowcount
        if affected:
            logger.info("Deleted entry %s", entry_id)
            await AuditService.log(conn, action="delete", object_type="entry", object_id=entry_id)
        return affected > 0

    @staticmethod
    def _row_to_entry_read(row: sqlite3.Row) -> EntryRead:
        return EntryRead(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            date=parse_timestamp(row["date"]),
            blog_id=row["blog_id"],
        )
