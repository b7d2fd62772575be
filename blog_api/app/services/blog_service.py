"""
Business logic for blogs.

CRUD operations run on the connection of the current request, so all
statements issued while handling one request (including the audit
row) share a transaction.  Listing with ``eager=True`` goes through
``SQLiteEntryStore`` to embed each blog's complete entry list.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from ..schemas.blog import BlogCreate, BlogRead, BlogUpdate
from .audit_service import AuditService
from .entry_store import SQLiteEntryStore

logger = logging.getLogger(__name__)


class BlogService:
    """Service for managing blogs."""

    @classmethod
    async def create_blog(cls, conn: sqlite3.Connection, data: BlogCreate) -> BlogRead:
        """Insert a new blog and return it."""
        cursor = conn.execute(
            "INSERT INTO blogs (name, handle) VALUES (?, ?)",
            (data.name, data.handle),
        )
        blog_id = cursor.lastrowid
        logger.info("Created blog %s", blog_id)
        await AuditService.log(
            conn,
            action="create",
            object_type="blog",
            object_id=blog_id,
            details={"name": data.name},
        )
        return BlogRead(id=blog_id, name=data.name, handle=data.handle)

    @classmethod
    async def update_blog(cls, conn: sqlite3.Connection, data: BlogUpdate) -> Optional[BlogRead]:
        """Replace name and handle of an existing blog.

        Returns ``None`` if no blog with ``data.id`` exists.
        """
        cursor = conn.execute(
            """
            UPDATE blogs
            SET name = ?, handle = ?, updated_at = CURRENT_TIMESTAMP
            WHERE id = ?
            """,
            (data.name, data.handle, data.id),
        )
        if cursor.rowcount == 0:
            return None
        logger.info("Updated blog %s", data.id)
        await AuditService.log(
            conn,
            action="update",
            object_type="blog",
            object_id=data.id,
            details={"name": data.name, "handle": data.handle},
        )
        return BlogRead(id=data.id, name=data.name, handle=data.handle)

    @classmethod
    async def list_blogs(cls, conn: sqlite3.Connection, eager: bool = False) -> List[BlogRead]:
        """Return all blogs ordered by id, optionally with their entries."""
        if eager:
            blogs = SQLiteEntryStore(conn).list_all_blogs_with_entries()
            return [BlogRead.model_validate(blog) for blog in blogs]
        rows = conn.execute("SELECT id, name, handle FROM blogs ORDER BY id").fetchall()
        return [cls._row_to_blog_read(row) for row in rows]

    @classmethod
    async def get_blog(cls, conn: sqlite3.Connection, blog_id: int) -> Optional[BlogRead]:
        row = conn.execute(
            "SELECT id, name, handle FROM blogs WHERE id = ?",
            (blog_id,),
        ).fetchone()
        if not row:
            return None
        return cls._row_to_blog_read(row)

    @classmethod
    async def exists(cls, conn: sqlite3.Connection, blog_id: int) -> bool:
        row = conn.execute("SELECT 1 FROM blogs WHERE id = ?", (blog_id,)).fetchone()
        return row is not None

    @classmethod
    async def delete_blog(cls, conn: sqlite3.Connection, blog_id: int) -> bool:
        """Delete a blog and, through the foreign key, its entries.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        cursor = conn.execute("DELETE FROM blogs WHERE id = ?", (blog_id,))
        affected = cursor.rowcount
        if affected:
            logger.info("Deleted blog %s", blog_id)
            await AuditService.log(conn, action="delete", object_type="blog", object_id=blog_id)
        return affected > 0

    @staticmethod
    def _row_to_blog_read(row: sqlite3.Row) -> BlogRead:
        return BlogRead(id=row["id"], name=row["name"], handle=row["handle"])
