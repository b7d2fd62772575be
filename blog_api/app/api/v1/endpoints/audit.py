"""
Audit log endpoint for API v1.

Read-only access to the audit trail written by the blog, entry and
cleanup operations.
"""

import sqlite3
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from blog_api.app.core.db import get_db
from blog_api.app.schemas.audit import AuditLogRead
from blog_api.app.services.audit_service import AuditService

router = APIRouter()


@router.get("", response_model=List[AuditLogRead])
async def list_audit_logs(
    object_type: Optional[str] = Query(None),
    action: Optional[str] = Query(None),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    conn: sqlite3.Connection = Depends(get_db),
) -> List[AuditLogRead]:
    """Return audit records, newest first.

    - **object_type**: filter by affected object type (`blog`, `entry`).
    - **action**: filter by action (`create`, `update`, `delete`, `clean`).
    - **limit**, **offset**: pagination.
    """
    return await AuditService.list_logs(
        conn,
        object_type=object_type,
        action=action,
        limit=limit,
        offset=offset,
    )
