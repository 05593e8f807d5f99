from __future__ import annotations

from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.value_objects.audit_action import AuditAction


def ensure_can_delete(actor: Actor) -> None:
    if not actor.role.can_delete():
        raise Forbidden("Role not allowed to delete dogs")


async def execute(uow: UnitOfWork, actor: Actor, dog_id: UUID) -> None:
    ensure_can_delete(actor)
    existing = await uow.dogs.get(dog_id)
    if not existing:
        raise NotFound("Dog not found")
    # A completed record must keep exactly litter_size puppies
    record = await uow.breeding_records.find_completed_for_puppy(dog_id)
    if record:
        raise ConflictError(
            "Dog is a puppy of a completed breeding record",
            details={"breeding_record_id": str(record.id)},
        )
    deleted = await uow.dogs.delete(dog_id)
    if not deleted:
        raise NotFound("Dog not found")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.DELETE,
        entity_type="Dog",
        entity_id=dog_id,
        before=existing,
    )
    await uow.commit()
