from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.lineage import ensure_valid_parents
from pedigree.application.use_cases.dogs.update_dog import ensure_can_update
from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.audit_action import AuditAction


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    dog_id: UUID,
    *,
    sire_id: UUID | None = None,
    dam_id: UUID | None = None,
    max_generations: int,
) -> Dog:
    """Assign sire and/or dam to an existing dog.

    Parents left as None keep their current value. The acyclicity walk runs
    against the resulting pair, so a cycle through either side is rejected.
    """
    ensure_can_update(actor)
    if sire_id is None and dam_id is None:
        raise ValidationError("At least one of sire_id or dam_id is required")
    existing = await uow.dogs.get(dog_id)
    if not existing:
        raise NotFound("Dog not found")

    new_sire = sire_id if sire_id is not None else existing.sire_id
    new_dam = dam_id if dam_id is not None else existing.dam_id
    await ensure_valid_parents(
        uow, dog_id=dog_id, sire_id=new_sire, dam_id=new_dam, max_generations=max_generations
    )
    updated = await uow.dogs.update(
        dog_id,
        {"sire_id": new_sire, "dam_id": new_dam, "updated_at": datetime.now(timezone.utc)},
        expected_version=existing.version,
    )
    if not updated:
        raise ConflictError("Dog was modified concurrently")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="Dog",
        entity_id=dog_id,
        before=existing,
        after=updated,
        metadata={"changed_fields": ["dam_id", "sire_id"]},
    )
    await uow.commit()
    return updated
