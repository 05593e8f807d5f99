from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import ensure_non_negative, parse_enum
from pedigree.domain.models.breeding_record import BreedingRecord
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.breeding_record_status import BreedingRecordStatus


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    record_id: UUID,
    status: str | BreedingRecordStatus,
    litter_size: int | None = None,
) -> BreedingRecord:
    if not actor.role.can_update():
        raise Forbidden("Role not allowed to update breeding records")
    target = parse_enum(BreedingRecordStatus, status, "status")
    ensure_non_negative(litter_size, "litter_size")
    record = await uow.breeding_records.get(record_id)
    if not record:
        raise NotFound("Breeding record not found")
    if not record.status.can_transition_to(target):
        raise ConflictError(
            f"Cannot move breeding record from {record.status.value} to {target.value}",
            details={"from": record.status.value, "to": target.value},
        )

    size = litter_size if litter_size is not None else record.litter_size
    if target is BreedingRecordStatus.COMPLETED and size is not None:
        puppies = await uow.breeding_records.count_puppies(record_id)
        if puppies != size:
            raise ConflictError(
                "Litter size does not match the number of attached puppies",
                details={"litter_size": size, "puppies": puppies},
            )

    data: dict = {"status": target, "updated_at": datetime.now(timezone.utc)}
    if litter_size is not None:
        data["litter_size"] = litter_size
    if target is record.status and litter_size in (None, record.litter_size):
        return record
    updated = await uow.breeding_records.update(record_id, data, expected_version=record.version)
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
        metadata={"status": {"from": record.status.value, "to": target.value}},
    )
    await uow.commit()
    return updated
