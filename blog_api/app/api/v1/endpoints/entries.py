"""
Entry endpoints for API v1.

CRUD for blog entries.  Every entry must reference an existing blog;
a create or update pointing at an unknown blog is rejected with 400
and error key ``blognotexist``.
"""

import logging
import sqlite3
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from blog_api.app.core.db import get_db
from blog_api.app.core.errors import BadRequestAlertException, NotFoundError
from blog_api.app.core.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
)
from blog_api.app.schemas.entry import EntryCreate, EntryRead, EntryUpdate
from blog_api.app.services.entry_service import EntryService

ENTITY_NAME = "entry"

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=EntryRead, status_code=status.HTTP_201_CREATED)
async def create_entry(
    entry_in: EntryCreate,
    request: Request,
    response: Response,
    conn: sqlite3.Connection = Depends(get_db),
) -> EntryRead:
    logger.debug("REST request to save Entry : %s", entry_in)
    if entry_in.id is not None:
        raise BadRequestAlertException("A new entry cannot already have an ID", ENTITY_NAME, "idexists")
    try:
        entry = await EntryService.create_entry(conn, entry_in)
    except NotFoundError as exc:
        raise BadRequestAlertException("Blog does not exist", ENTITY_NAME, "blognotexist") from exc
    response.headers["Location"] = f"{request.url.path}/{entry.id}"
    response.headers.update(entity_creation_alert(ENTITY_NAME, str(entry.id)))
    return entry


@router.put("", response_model=EntryRead)
async def update_entry(
    entry_in: EntryUpdate,
    response: Response,
    conn: sqlite3.Connection = Depends(get_db),
) -> EntryRead:
    logger.debug("REST request to update Entry : %s", entry_in)
    if entry_in.id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
    try:
        entry = await EntryService.update_entry(conn, entry_in)
    except NotFoundError as exc:
        raise BadRequestAlertException("Blog does not exist", ENTITY_NAME, "blognotexist") from exc
    if entry is None:
        raise BadRequestAlertException("Not exist id", ENTITY_NAME, "idnotexist")
    response.headers.update(entity_update_alert(ENTITY_NAME, str(entry.id)))
    return entry


@router.get("", response_model=List[EntryRead])
async def list_entries(
    blog_id: Optional[int] = Query(None, description="Only entries of this blog"),
    conn: sqlite3.Connection = Depends(get_db),
) -> List[EntryRead]:
    logger.debug("REST request to get all Entries")
    return await EntryService.list_entries(conn, blog_id=blog_id)


@router.get("/{entry_id}", response_model=EntryRead)
async def get_entry(entry_id: int, conn: sqlite3.Connection = Depends(get_db)) -> EntryRead:
    logger.debug("REST request to get Entry : %s", entry_id)
    entry = await EntryService.get_entry(conn, entry_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found")
    return entry


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: int, conn: sqlite3.Connection = Depends(get_db)) -> Response:
    logger.debug("REST request to delete Entry : %s", entry_id)
    await EntryService.delete_entry(conn, entry_id)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=entity_deletion_alert(ENTITY_NAME, str(entry_id)),
    )
