from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.ownership import Ownership
from pedigree.domain.value_objects.audit_action import AuditAction


@dataclass(slots=True)
class CreateOwnershipInput:
    owner_id: UUID
    dog_id: UUID
    start_date: date
    is_current: bool = True
    end_date: date | None = None
    transfer_document_url: str | None = None


async def execute(uow: UnitOfWork, actor: Actor, payload: CreateOwnershipInput) -> Ownership:
    """Record an acquisition or a historical ownership period.

    A current row for a dog that already has one is rejected by the partial
    unique index and surfaces as ConflictError; changing hands goes through
    ``transfer_ownership`` instead.
    """
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to record ownership")
    if payload.is_current and payload.end_date is not None:
        raise ValidationError("A current ownership cannot have an end_date")
    if not payload.is_current and payload.end_date is None:
        raise ValidationError("A former ownership requires an end_date")
    if payload.end_date is not None and payload.end_date < payload.start_date:
        raise ValidationError("end_date cannot be before start_date")
    if not await uow.owners.get(payload.owner_id):
        raise NotFound("Owner not found")
    if not await uow.dogs.get(payload.dog_id):
        raise NotFound("Dog not found")

    ownership = await uow.ownerships.add(
        Ownership.create(
            owner_id=payload.owner_id,
            dog_id=payload.dog_id,
            start_date=payload.start_date,
            is_current=payload.is_current,
            end_date=payload.end_date,
            transfer_document_url=payload.transfer_document_url,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="Ownership",
        entity_id=ownership.id,
        after=ownership,
    )
    await uow.commit()
    return ownership
