from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.user import User
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, actor: Actor, user_id: UUID) -> User:
    actor.require(Role.ADMIN)
    if user_id == actor.user_id:
        raise ValidationError("Administrators cannot deactivate themselves")
    user = await uow.users.get(user_id)
    if not user:
        raise NotFound("User not found")
    updated = await uow.users.update(
        user_id, {"is_active": False, "updated_at": datetime.now(timezone.utc)}
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="User",
        entity_id=user_id,
        before=user,
        after=updated,
        metadata={"deactivated": True},
    )
    await uow.commit()
    return updated
