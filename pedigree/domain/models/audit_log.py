from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from pedigree.domain.value_objects.audit_action import AuditAction


@dataclass(frozen=True, slots=True)
class AuditLog:
    """Immutable record of one successful mutation."""

    action: AuditAction
    entity_type: str
    entity_id: str
    user_id: UUID | None
    previous_state: str | None = None
    new_state: str | None = None
    ip_address: str | None = None
    metadata: dict[str, Any] | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: int | None = None
