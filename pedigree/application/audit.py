from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any
from uuid import UUID

from pedigree.application.actor import Actor
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.audit_log import AuditLog
from pedigree.domain.value_objects.audit_action import AuditAction

REDACTED_FIELDS = frozenset({"hashed_password"})


def snapshot(entity: Any) -> str | None:
    if entity is None:
        return None
    data = asdict(entity) if is_dataclass(entity) else dict(entity)
    for name in REDACTED_FIELDS & data.keys():
        data[name] = "***"
    return json.dumps(data, default=str, sort_keys=True)


async def record(
    uow: UnitOfWork,
    *,
    actor: Actor | None,
    action: AuditAction,
    entity_type: str,
    entity_id: UUID | str,
    before: Any = None,
    after: Any = None,
    metadata: dict[str, Any] | None = None,
) -> AuditLog:
    """Append the audit row for a mutation inside the caller's transaction.

    Must be awaited before ``uow.commit()`` so the row and the change it
    describes land together or not at all.
    """
    entry = AuditLog(
        action=action,
        entity_type=entity_type,
        entity_id=str(entity_id),
        user_id=actor.user_id if actor else None,
        previous_state=snapshot(before),
        new_state=snapshot(after),
        ip_address=actor.ip_address if actor else None,
        metadata=metadata,
    )
    return await uow.audit_logs.add(entry)
