from __future__ import annotations

from dataclasses import dataclass

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import require_text
from pedigree.domain.models.owner import Owner
from pedigree.domain.value_objects.audit_action import AuditAction


@dataclass(slots=True)
class CreateOwnerInput:
    name: str
    contact_email: str | None = None
    contact_phone: str | None = None
    address: str | None = None
    is_breeder: bool = False


async def execute(uow: UnitOfWork, actor: Actor, payload: CreateOwnerInput) -> Owner:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to create owners")
    owner = await uow.owners.add(
        Owner.create(
            name=require_text(payload.name, "name"),
            contact_email=payload.contact_email,
            contact_phone=payload.contact_phone,
            address=payload.address,
            is_breeder=payload.is_breeder,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="Owner",
        entity_id=owner.id,
        after=owner,
    )
    await uow.commit()
    return owner
