from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import require_text
from pedigree.domain.models.competition_result import CompetitionResult
from pedigree.domain.value_objects.audit_action import AuditAction

UPDATABLE_FIELDS = (
    "competition_name",
    "competition_date",
    "location",
    "rank",
    "score",
    "title_earned",
    "judge",
    "notes",
)


@dataclass(slots=True)
class UpdateCompetitionResultInput:
    competition_name: str | None = None
    competition_date: date | None = None
    location: str | None = None
    rank: int | None = None
    score: float | None = None
    title_earned: str | None = None
    judge: str | None = None
    notes: str | None = None


async def load_for_dog(uow: UnitOfWork, dog_id: UUID, result_id: UUID) -> CompetitionResult:
    result = await uow.competition_results.get(result_id)
    if not result or result.dog_id != dog_id:
        raise NotFound("Competition result not found")
    return result


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    dog_id: UUID,
    result_id: UUID,
    payload: UpdateCompetitionResultInput,
) -> CompetitionResult:
    if not actor.role.can_update():
        raise Forbidden("Role not allowed to update competition results")
    existing = await load_for_dog(uow, dog_id, result_id)
    data = {
        name: getattr(payload, name)
        for name in UPDATABLE_FIELDS
        if getattr(payload, name) is not None
    }
    if not data:
        return existing
    if "rank" in data and data["rank"] < 1:
        raise ValidationError("rank must be 1 or greater", details={"rank": data["rank"]})
    if "competition_name" in data:
        data["competition_name"] = require_text(data["competition_name"], "competition_name")

    updated = await uow.competition_results.update(result_id, data)
    if not updated:
        raise NotFound("Competition result not found")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="CompetitionResult",
        entity_id=result_id,
        before=existing,
        after=updated,
        metadata={"dog_id": str(dog_id), "changed_fields": sorted(data)},
    )
    await uow.commit()
    return updated
