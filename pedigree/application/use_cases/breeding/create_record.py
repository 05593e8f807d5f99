from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import ensure_non_negative
from pedigree.domain.models.breeding_record import BreedingRecord
from pedigree.domain.value_objects.audit_action import AuditAction


@dataclass(slots=True)
class CreateRecordInput:
    breeding_pair_id: UUID
    breeding_date: date
    litter_size: int | None = None
    comments: str | None = None


async def execute(uow: UnitOfWork, actor: Actor, payload: CreateRecordInput) -> BreedingRecord:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to record breedings")
    ensure_non_negative(payload.litter_size, "litter_size")
    pair = await uow.breeding_pairs.get(payload.breeding_pair_id)
    if not pair:
        raise NotFound("Breeding pair not found")
    if not pair.status.is_active():
        raise ConflictError(
            "Cannot record a breeding for an inactive pair",
            details={"status": pair.status.value},
        )

    record = await uow.breeding_records.add(
        BreedingRecord.create(
            breeding_pair_id=pair.id,
            breeding_date=payload.breeding_date,
            litter_size=payload.litter_size,
            comments=payload.comments,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="BreedingRecord",
        entity_id=record.id,
        after=record,
    )
    await uow.commit()
    return record
