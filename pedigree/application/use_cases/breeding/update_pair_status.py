from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import parse_enum
from pedigree.domain.models.breeding_pair import BreedingPair
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.breeding_pair_status import BreedingPairStatus


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    pair_id: UUID,
    status: str | BreedingPairStatus,
    notes: str | None = None,
) -> BreedingPair:
    if not actor.role.can_update():
        raise Forbidden("Role not allowed to update breeding pairs")
    target = parse_enum(BreedingPairStatus, status, "status")
    pair = await uow.breeding_pairs.get(pair_id)
    if not pair:
        raise NotFound("Breeding pair not found")
    if target is pair.status:
        return pair
    if not pair.status.can_transition_to(target):
        raise ConflictError(
            f"Cannot move breeding pair from {pair.status.value} to {target.value}",
            details={"from": pair.status.value, "to": target.value},
        )
    if target is BreedingPairStatus.CANCELLED and not (notes and notes.strip()):
        raise ValidationError("A reason is required to cancel a breeding pair")

    data: dict = {"status": target, "updated_at": datetime.now(timezone.utc)}
    if notes is not None:
        data["status_notes"] = notes
    # Leaving the active set frees the (sire, dam, program) slot; re-entering it is impossible
    updated = await uow.breeding_pairs.update(pair_id, data, expected_version=pair.version)
    if not updated:
        raise ConflictError("Breeding pair was modified concurrently")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="BreedingPair",
        entity_id=pair_id,
        before=pair,
        after=updated,
        metadata={"status": {"from": pair.status.value, "to": target.value}},
    )
    await uow.commit()
    return updated
