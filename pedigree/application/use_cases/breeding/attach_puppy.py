from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.lineage import ensure_valid_parents
from pedigree.domain.models.breeding_record import BreedingRecord
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.breeding_record_status import BreedingRecordStatus


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    record_id: UUID,
    puppy_id: UUID,
    *,
    max_generations: int,
) -> BreedingRecord:
    """Link a puppy to a breeding record.

    A COMPLETED record with a litter size is closed once that many puppies are
    attached. Unknown parents of the puppy are filled in from the pair.
    """
    if not actor.role.can_update():
        raise Forbidden("Role not allowed to update breeding records")
    record = await uow.breeding_records.get(record_id)
    if not record:
        raise NotFound("Breeding record not found")
    puppy = await uow.dogs.get(puppy_id)
    if not puppy:
        raise NotFound("Puppy not found")
    if puppy_id in record.puppy_ids:
        raise ConflictError(
            "Puppy is already attached to this breeding record",
            details={"puppy_id": str(puppy_id)},
        )
    if (
        record.status is BreedingRecordStatus.COMPLETED
        and record.litter_size is not None
        and len(record.puppy_ids) >= record.litter_size
    ):
        raise ConflictError(
            "Breeding record already has its full litter",
            details={"litter_size": record.litter_size},
        )

    pair = await uow.breeding_pairs.get(record.breeding_pair_id)
    if pair is None:
        raise NotFound("Breeding pair not found")
    if (puppy.sire_id not in (None, pair.sire_id)) or (puppy.dam_id not in (None, pair.dam_id)):
        raise ConflictError("Puppy's recorded parents do not match the breeding pair")
    if puppy.sire_id is None or puppy.dam_id is None:
        await ensure_valid_parents(
            uow,
            dog_id=puppy_id,
            sire_id=pair.sire_id,
            dam_id=pair.dam_id,
            max_generations=max_generations,
        )
        linked = await uow.dogs.update(
            puppy_id,
            {
                "sire_id": pair.sire_id,
                "dam_id": pair.dam_id,
                "updated_at": datetime.now(timezone.utc),
            },
            expected_version=puppy.version,
        )
        if not linked:
            raise ConflictError("Puppy was modified concurrently")

    await uow.breeding_records.add_puppy(record_id, puppy_id)
    # Bumping the version serialises concurrent attaches against the capacity check
    updated = await uow.breeding_records.update(
        record_id, {"updated_at": datetime.now(timezone.utc)}, expected_version=record.version
    )
    if not updated:
        raise ConflictError("Breeding record was modified concurrently")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="BreedingRecord",
        entity_id=record_id,
        before=record,
        after=updated,
        metadata={"attached_puppy_id": str(puppy_id)},
    )
    await uow.commit()
    return updated
