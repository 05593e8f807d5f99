from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.log_level import LogLevel


class AuditLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    timestamp: datetime
    action: AuditAction
    entity_type: str
    entity_id: str
    user_id: UUID | None = None
    previous_state: str | None = None
    new_state: str | None = None
    ip_address: str | None = None
    metadata: dict[str, Any] | None = None


class SystemLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    timestamp: datetime
    level: LogLevel
    message: str
    source: str
    details: dict[str, Any] | None = None
    stack_trace: str | None = None
    ip_address: str | None = None
    user_id: UUID | None = None
