from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import parse_enum
from pedigree.domain.models.user import User
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, actor: Actor, user_id: UUID, role: str | Role) -> User:
    actor.require(Role.ADMIN)
    new_role = parse_enum(Role, role, "role")
    user = await uow.users.get(user_id)
    if not user:
        raise NotFound("User not found")
    if user.id == actor.user_id and new_role is not Role.ADMIN:
        raise ValidationError("Administrators cannot demote themselves")

    updated = await uow.users.update(
        user_id, {"role": new_role, "updated_at": datetime.now(timezone.utc)}
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="User",
        entity_id=user_id,
        before=user,
        after=updated,
    )
    await uow.commit()
    return updated
