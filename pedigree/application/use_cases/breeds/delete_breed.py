from __future__ import annotations

from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, actor: Actor, breed_id: UUID) -> None:
    actor.require(Role.ADMIN)
    existing = await uow.breeds.get(breed_id)
    if not existing:
        raise NotFound("Breed not found")
    linked = await uow.dogs.count_by_breed(breed_id)
    if linked:
        raise ConflictError(
            f"Cannot delete breed: {linked} dogs are associated with it",
            details={"dogs": linked},
        )
    if not await uow.breeds.delete(breed_id):
        raise NotFound("Breed not found")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.DELETE,
        entity_type="Breed",
        entity_id=breed_id,
        before=existing,
    )
    await uow.commit()
