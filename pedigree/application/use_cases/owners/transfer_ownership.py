from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.ownership import Ownership
from pedigree.domain.value_objects.audit_action import AuditAction

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransferOwnershipInput:
    dog_id: UUID
    new_owner_id: UUID
    transfer_date: date | None = None
    from_owner_id: UUID | None = None
    transfer_document_url: str | None = None


@dataclass(slots=True)
class TransferResult:
    previous: Ownership
    current: Ownership


async def execute(uow: UnitOfWork, actor: Actor, payload: TransferOwnershipInput) -> TransferResult:
    """Close the dog's current ownership and open the new one in one transaction.

    The close is a conditional UPDATE, so of two concurrent transfers only one
    can match the still-current row; the other finds nothing to close and gets
    a ConflictError. The partial unique index on current rows backs this up at
    insert time.
    """
    if not actor.role.can_update():
        raise Forbidden("Role not allowed to transfer ownership")
    transfer_date = payload.transfer_date or datetime.now(timezone.utc).date()

    if not await uow.dogs.get(payload.dog_id):
        raise NotFound("Dog not found")
    if not await uow.owners.get(payload.new_owner_id):
        raise NotFound("New owner not found")

    current = await uow.ownerships.get_current(payload.dog_id)
    if current is None:
        raise ValidationError(
            "Dog has no current owner; record an ownership instead",
            details={"dog_id": str(payload.dog_id)},
        )
    if current.owner_id == payload.new_owner_id:
        raise ValidationError("Dog is already owned by this owner")
    if transfer_date < current.start_date:
        raise ValidationError(
            "transfer_date cannot be before the current ownership started",
            details={"start_date": str(current.start_date)},
        )

    expected_owner = payload.from_owner_id or current.owner_id
    closed = await uow.ownerships.close_current(
        payload.dog_id, end_date=transfer_date, expected_owner_id=expected_owner
    )
    if closed is None:
        logger.info("Ownership transfer for dog %s lost a race", payload.dog_id)
        raise ConflictError(
            "Current ownership changed during transfer",
            details={"dog_id": str(payload.dog_id), "expected_owner_id": str(expected_owner)},
        )

    opened = await uow.ownerships.add(
        Ownership.create(
            owner_id=payload.new_owner_id,
            dog_id=payload.dog_id,
            start_date=transfer_date,
            transfer_document_url=payload.transfer_document_url,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.TRANSFER_OWNERSHIP,
        entity_type="Dog",
        entity_id=payload.dog_id,
        before=closed,
        after=opened,
        metadata={
            "previous_owner_id": str(closed.owner_id),
            "new_owner_id": str(opened.owner_id),
        },
    )
    await uow.commit()
    return TransferResult(previous=closed, current=opened)
