"""
Blog endpoints for API v1.

Standard CRUD for blogs plus the two keyword cleanup operations:

* ``DELETE /blogs/clean`` removes matching entries from every blog and
  always answers 204.
* ``DELETE /blogs/{id}/clean`` removes matching entries from one blog;
  an unknown id is rejected with 400 and error key ``idnotexist``.

Both cleanup routes take the keyword as the raw request body.
"""

import logging
import sqlite3
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from blog_api.app.api.deps import get_cleanup_service, read_keyword
from blog_api.app.core.db import get_db
from blog_api.app.core.errors import BadRequestAlertException, NotFoundError
from blog_api.app.core.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
)
from blog_api.app.schemas.blog import BlogCreate, BlogRead, BlogUpdate
from blog_api.app.services.audit_service import AuditService
from blog_api.app.services.blog_service import BlogService
from blog_api.app.services.cleanup_service import CleanupService

ENTITY_NAME = "blog"

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=BlogRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_blog(
    blog_in: BlogCreate,
    request: Request,
    response: Response,
    conn: sqlite3.Connection = Depends(get_db),
) -> BlogRead:
    """Create a new blog.

    Returns 400 ``idexists`` if the payload already carries an id.
    """
    logger.debug("REST request to save Blog : %s", blog_in)
    if blog_in.id is not None:
        raise BadRequestAlertException("A new blog cannot already have an ID", ENTITY_NAME, "idexists")
    blog = await BlogService.create_blog(conn, blog_in)
    response.headers["Location"] = f"{request.url.path}/{blog.id}"
    response.headers.update(entity_creation_alert(ENTITY_NAME, str(blog.id)))
    return blog


@router.put("", response_model=BlogRead, response_model_exclude_none=True)
async def update_blog(
    blog_in: BlogUpdate,
    response: Response,
    conn: sqlite3.Connection = Depends(get_db),
) -> BlogRead:
    """Update an existing blog identified by the id in the payload."""
    logger.debug("REST request to update Blog : %s", blog_in)
    if blog_in.id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
    blog = await BlogService.update_blog(conn, blog_in)
    if blog is None:
        raise BadRequestAlertException("Not exist id", ENTITY_NAME, "idnotexist")
    response.headers.update(entity_update_alert(ENTITY_NAME, str(blog.id)))
    return blog


@router.get("", response_model=List[BlogRead], response_model_exclude_none=True)
async def list_blogs(
    eager: bool = Query(False, description="Embed each blog's entries"),
    conn: sqlite3.Connection = Depends(get_db),
) -> List[BlogRead]:
    logger.debug("REST request to get all Blogs")
    return await BlogService.list_blogs(conn, eager=eager)


# Registered ahead of ``/{blog_id}`` so that "clean" is not taken for an id.
@router.delete("/clean", status_code=status.HTTP_204_NO_CONTENT)
async def clean_all_blogs(
    keyword: str = Depends(read_keyword),
    cleanup: CleanupService = Depends(get_cleanup_service),
    conn: sqlite3.Connection = Depends(get_db),
) -> Response:
    """Delete entries of every blog whose title or content contains ``keyword``."""
    keyword = keyword.lower()
    logger.debug("REST request to delete Keyword : %s", keyword)
    cleanup.clean_all(keyword)
    await AuditService.log(
        conn,
        action="clean",
        object_type=ENTITY_NAME,
        details={"keyword": keyword, "scope": "all"},
    )
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=entity_deletion_alert(ENTITY_NAME, keyword),
    )


@router.get("/{blog_id}", response_model=BlogRead, response_model_exclude_none=True)
async def get_blog(blog_id: int, conn: sqlite3.Connection = Depends(get_db)) -> BlogRead:
    """Retrieve a single blog by its ID; 404 if it does not exist."""
    logger.debug("REST request to get Blog : %s", blog_id)
    blog = await BlogService.get_blog(conn, blog_id)
    if blog is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found")
    return blog


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(blog_id: int, conn: sqlite3.Connection = Depends(get_db)) -> Response:
    """Delete a blog and its entries.  Answers 204 whether or not it existed."""
    logger.debug("REST request to delete Blog : %s", blog_id)
    await BlogService.delete_blog(conn, blog_id)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=entity_deletion_alert(ENTITY_NAME, str(blog_id)),
    )


@router.delete("/{blog_id}/clean", status_code=status.HTTP_204_NO_CONTENT)
async def clean_blog(
    blog_id: int,
    keyword: str = Depends(read_keyword),
    cleanup: CleanupService = Depends(get_cleanup_service),
    conn: sqlite3.Connection = Depends(get_db),
) -> Response:
    """Delete entries of one blog whose title or content contains ``keyword``."""
    keyword = keyword.lower()
    logger.debug("REST request to delete Keyword from Blog : %s from %s", keyword, blog_id)
    try:
        cleanup.clean_one(blog_id, keyword)
    except NotFoundError as exc:
        raise BadRequestAlertException("Not exist id", ENTITY_NAME, "idnotexist") from exc
    await AuditService.log(
        conn,
        action="clean",
        object_type=ENTITY_NAME,
        object_id=blog_id,
        details={"keyword": keyword, "scope": blog_id},
    )
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=entity_deletion_alert(ENTITY_NAME, keyword),
    )
