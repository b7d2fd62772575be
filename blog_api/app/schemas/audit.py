"""Pydantic model for audit log records."""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class AuditLogRead(BaseModel):
    id: int
    action: str
    object_type: Optional[str]
    object_id: Optional[int]
    timestamp: str
    details: Optional[Dict[str, Any]]
