from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.audit_log import AuditLog
from pedigree.domain.value_objects.audit_action import AuditAction


class AuditLogRepository(Protocol):
    """Append-only: there is deliberately no update or delete."""

    async def add(self, entry: AuditLog) -> AuditLog: ...

    async def get(self, entry_id: int) -> AuditLog | None: ...

    async def list(
        self,
        *,
        limit: int,
        offset: int = 0,
        entity_type: str | None = None,
        entity_id: str | None = None,
        user_id: UUID | None = None,
        action: AuditAction | None = None,
    ) -> list[AuditLog]: ...
