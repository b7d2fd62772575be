"""
Request dependencies shared by the endpoints.

``get_db`` opens one transactional connection per request; FastAPI
caches it per request, so the entry store, the cleanup service and
the audit writer all operate inside the same transaction.
"""

import logging
import sqlite3

from fastapi import Depends, Request

from ..core.db import get_db
from ..services.cleanup_service import CleanupService
from ..services.entry_store import EntryStore, SQLiteEntryStore


def get_entry_store(conn: sqlite3.Connection = Depends(get_db)) -> EntryStore:
    return SQLiteEntryStore(conn)


def get_cleanup_service(store: EntryStore = Depends(get_entry_store)) -> CleanupService:
    return CleanupService(store, logging.getLogger("blog_api.cleanup"))


async def read_keyword(request: Request) -> str:
    """Return the raw request body as the cleanup keyword.

    The body is taken verbatim, without JSON decoding; an empty body
    is an empty keyword.  Bytes that are not valid UTF-8 become U+FFFD
    instead of failing the request.
    """
    body = await request.body()
    return body.decode("utf-8", errors="replace")
