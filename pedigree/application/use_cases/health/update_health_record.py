from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import parse_enum, require_text
from pedigree.domain.models.health_record import HealthRecord
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.health_record_type import HealthRecordType

UPDATABLE_FIELDS = (
    "record_date",
    "type",
    "description",
    "results",
    "veterinarian_name",
    "clinic_name",
    "notes",
)


@dataclass(slots=True)
class UpdateHealthRecordInput:
    record_date: date | None = None
    type: str | HealthRecordType | None = None
    description: str | None = None
    results: str | None = None
    veterinarian_name: str | None = None
    clinic_name: str | None = None
    notes: str | None = None


async def load_for_dog(uow: UnitOfWork, dog_id: UUID, record_id: UUID) -> HealthRecord:
    record = await uow.health_records.get(record_id)
    if not record or record.dog_id != dog_id:
        raise NotFound("Health record not found")
    return record


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    dog_id: UUID,
    record_id: UUID,
    payload: UpdateHealthRecordInput,
) -> HealthRecord:
    if not actor.role.can_update():
        raise Forbidden("Role not allowed to update health records")
    existing = await load_for_dog(uow, dog_id, record_id)
    data = {
        name: getattr(payload, name)
        for name in UPDATABLE_FIELDS
        if getattr(payload, name) is not None
    }
    if not data:
        return existing
    if "type" in data:
        data["type"] = parse_enum(HealthRecordType, data["type"], "type")
    if "description" in data:
        data["description"] = require_text(data["description"], "description")

    updated = await uow.health_records.update(record_id, data)
    if not updated:
        raise NotFound("Health record not found")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="HealthRecord",
        entity_id=record_id,
        before=existing,
        after=updated,
        metadata={"dog_id": str(dog_id), "changed_fields": sorted(data)},
    )
    await uow.commit()
    return updated
