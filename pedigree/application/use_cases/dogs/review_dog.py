from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.approval_status import ApprovalStatus
from pedigree.domain.value_objects.audit_action import AuditAction

_AUDIT_ACTIONS = {
    ApprovalStatus.APPROVED: AuditAction.APPROVE,
    ApprovalStatus.DECLINED: AuditAction.REJECT,
}


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    dog_id: UUID,
    decision: ApprovalStatus,
    notes: str | None = None,
) -> Dog:
    """Move a PENDING dog to APPROVED or DECLINED, recording the reviewer."""
    if not actor.role.can_review():
        raise Forbidden("Only administrators can review dog registrations")
    if decision not in _AUDIT_ACTIONS:
        raise ValidationError("Decision must be APPROVED or DECLINED")
    existing = await uow.dogs.get(dog_id)
    if not existing:
        raise NotFound("Dog not found")
    if existing.approval_status is not ApprovalStatus.PENDING:
        raise ConflictError(
            f"Dog has already been {existing.approval_status.value.lower()}",
            details={"approval_status": existing.approval_status.value},
        )

    now = datetime.now(timezone.utc)
    updated = await uow.dogs.update(
        dog_id,
        {
            "approval_status": decision,
            "approved_by": actor.user_id,
            "approval_date": now,
            "approval_notes": notes,
            "updated_at": now,
        },
        expected_version=existing.version,
    )
    if not updated:
        raise ConflictError("Dog was modified concurrently")
    await audit.record(
        uow,
        actor=actor,
        action=_AUDIT_ACTIONS[decision],
        entity_type="Dog",
        entity_id=dog_id,
        before=existing,
        after=updated,
        metadata={"notes": notes} if notes else None,
    )
    await uow.commit()
    return updated


async def approve(uow: UnitOfWork, actor: Actor, dog_id: UUID, notes: str | None = None) -> Dog:
    return await execute(uow, actor, dog_id, ApprovalStatus.APPROVED, notes)


async def decline(uow: UnitOfWork, actor: Actor, dog_id: UUID, notes: str | None = None) -> Dog:
    return await execute(uow, actor, dog_id, ApprovalStatus.DECLINED, notes)
