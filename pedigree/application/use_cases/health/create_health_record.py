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


@dataclass(slots=True)
class CreateHealthRecordInput:
    dog_id: UUID
    record_date: date
    type: str | HealthRecordType
    description: str
    results: str | None = None
    veterinarian_name: str | None = None
    clinic_name: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, actor: Actor, payload: CreateHealthRecordInput
) -> HealthRecord:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to add health records")
    record_type = parse_enum(HealthRecordType, payload.type, "type")
    if not await uow.dogs.get(payload.dog_id):
        raise NotFound("Dog not found")
    record = await uow.health_records.add(
        HealthRecord.create(
            dog_id=payload.dog_id,
            record_date=payload.record_date,
            type=record_type,
            description=require_text(payload.description, "description"),
            results=payload.results,
            veterinarian_name=payload.veterinarian_name,
            clinic_name=payload.clinic_name,
            notes=payload.notes,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="HealthRecord",
        entity_id=record.id,
        after=record,
    )
    await uow.commit()
    return record
