"""
Error types and their HTTP translation.

``NotFoundError`` is raised by the service layer when a referenced
record does not exist.  ``BadRequestAlertException`` is raised by
endpoints to reject a request with a machine readable error key; the
handler registered by ``register_error_handlers`` renders it as a
problem document with status 400 and failure alert headers.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .headers import failure_alert

logger = logging.getLogger(__name__)

DEFAULT_TYPE = "about:blank"


class NotFoundError(Exception):
    """A record referenced by id does not exist."""

    def __init__(self, entity_name: str, entity_id: Any) -> None:
        super().__init__(f"{entity_name} {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


class BadRequestAlertException(Exception):
    """Reject a request with HTTP 400 and an ``entityName``/``errorKey`` pair."""

    def __init__(
        self,
        default_message: str,
        entity_name: str,
        error_key: str,
        type_: Optional[str] = None,
    ) -> None:
        super().__init__(default_message)
        self.title = default_message
        self.entity_name = entity_name
        self.error_key = error_key
        self.type = type_ or DEFAULT_TYPE

    def to_problem(self) -> dict:
        return {
            "type": self.type,
            "title": self.title,
            "status": status.HTTP_400_BAD_REQUEST,
            "entityName": self.entity_name,
            "errorKey": self.error_key,
            "message": f"error.{self.error_key}",
            "params": self.entity_name,
        }


async def bad_request_alert_handler(request: Request, exc: BadRequestAlertException) -> JSONResponse:
    logger.warning(
        "Bad request on %s %s: %s (%s.%s)",
        request.method,
        request.url.path,
        exc.title,
        exc.entity_name,
        exc.error_key,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=exc.to_problem(),
        headers=failure_alert(exc.entity_name, exc.error_key),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BadRequestAlertException, bad_request_alert_handler)
