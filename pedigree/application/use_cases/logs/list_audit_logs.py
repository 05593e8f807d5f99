from __future__ import annotations

from uuid import UUID

from pedigree.application.actor import Actor
from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import ensure_page, parse_enum
from pedigree.domain.models.audit_log import AuditLog
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    *,
    limit: int = 50,
    offset: int = 0,
    entity_type: str | None = None,
    entity_id: str | None = None,
    user_id: UUID | None = None,
    action: str | AuditAction | None = None,
) -> list[AuditLog]:
    actor.require(Role.ADMIN)
    ensure_page(limit, offset)
    return await uow.audit_logs.list(
        limit=limit,
        offset=offset,
        entity_type=entity_type,
        entity_id=entity_id,
        user_id=user_id,
        action=parse_enum(AuditAction, action, "action") if action is not None else None,
    )


async def get(uow: UnitOfWork, actor: Actor, entry_id: int) -> AuditLog:
    actor.require(Role.ADMIN)
    entry = await uow.audit_logs.get(entry_id)
    if not entry:
        raise NotFound("Audit log entry not found")
    return entry
