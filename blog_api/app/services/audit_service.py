"""
Audit service for recording and querying actions.

Mutating operations on blogs and entries, and every cleanup run, write
one row to ``audit_logs`` through the same connection as the change
itself, so the audit row is committed or rolled back together with it.
"""

from __future__ import annotations

import json
import sqlite3
from typing import List, Optional

from ..schemas.audit import AuditLogRead


class AuditService:
    """Service class for writing and retrieving audit logs."""

    @classmethod
    async def log(
        cls,
        conn: sqlite3.Connection,
        action: str,
        object_type: str,
        object_id: Optional[int] = None,
        details: Optional[dict] = None,
    ) -> None:
        """Insert a new audit record.

        Parameters
        ----------
        conn : sqlite3.Connection
            Connection of the surrounding request transaction.
        action : str
            Short description of the action ("create", "update",
            "delete", "clean").
        object_type : str
            Type of object affected ("blog", "entry").
        object_id : Optional[int]
            Primary key of the affected object, if applicable.
        details : Optional[dict]
            Additional structured data about the action, stored as JSON.
        """
        details_json = json.dumps(details) if details else None
        conn.execute(
            """
            INSERT INTO audit_logs (action, object_type, object_id, details)
            VALUES (?, ?, ?, ?)
            """,
            (action, object_type, object_id, details_json),
        )

    @classmethod
    async def list_logs(
        cls,
        conn: sqlite3.Connection,
        object_type: Optional[str] = None,
        action: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[AuditLogRead]:
        """Retrieve audit records, newest first, with optional filters."""
        query = "SELECT * FROM audit_logs"
        params: list = []
        where_clauses: list[str] = []
        if object_type:
            where_clauses.append("object_type = ?")
            params.append(object_type)
        if action:
            where_clauses.append("action = ?")
            params.append(action)
        if where_clauses:
            query += " WHERE " + " AND ".join(where_clauses)
        query += " ORDER BY id DESC LIMIT ? OFFSET ?"
        params.extend([limit, offset])
        rows = conn.execute(query, tuple(params)).fetchall()
        return [cls._row_to_audit_read(row) for row in rows]

    @staticmethod
    def _row_to_audit_read(row: sqlite3.Row) -> AuditLogRead:
        return AuditLogRead(
            id=row["id"],
            action=row["action"],
            object_type=row["object_type"],
            object_id=row["object_id"],
            timestamp=str(row["timestamp"]),
            details=json.loads(row["details"]) if row["details"] else None,
        )
