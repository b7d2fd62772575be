"""
Alert headers attached to successful mutating responses.

Clients (typically a single page front end) read ``X-<app>-alert`` to
show a notification and ``X-<app>-params`` to learn which entity the
message is about.  The alert value is a translation key of the form
``<app>.<entity>.<action>``.  Params are percent-encoded so
any keyword or id survives as a header value.
"""

from typing import Dict
from urllib.parse import quote

from .config import settings


def create_alert(application_name: str, message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": quote(param),
    }


def entity_creation_alert(entity_name: str, param: str) -> Dict[str, str]:
    app = settings.application_name
    return create_alert(app, f"{app}.{entity_name}.created", param)


def entity_update_alert(entity_name: str, param: str) -> Dict[str, str]:
    app = settings.application_name
    return create_alert(app, f"{app}.{entity_name}.updated", param)


def entity_deletion_alert(entity_name: str, param: str) -> Dict[str, str]:
    app = settings.application_name
    return create_alert(app, f"{app}.{entity_name}.deleted", param)


def failure_alert(entity_name: str, error_key: str) -> Dict[str, str]:
    app = settings.application_name
    return {
        f"X-{app}-error": f"error.{error_key}",
        f"X-{app}-params": entity_name,
    }
