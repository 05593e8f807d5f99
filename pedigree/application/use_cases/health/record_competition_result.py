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


@dataclass(slots=True)
class CompetitionResultInput:
    dog_id: UUID
    competition_name: str
    competition_date: date
    location: str | None = None
    rank: int | None = None
    score: float | None = None
    title_earned: str | None = None
    judge: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, actor: Actor, payload: CompetitionResultInput
) -> CompetitionResult:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to record competition results")
    if payload.rank is not None and payload.rank < 1:
        raise ValidationError("rank must be 1 or greater", details={"rank": payload.rank})
    if not await uow.dogs.get(payload.dog_id):
        raise NotFound("Dog not found")
    result = await uow.competition_results.add(
        CompetitionResult.create(
            dog_id=payload.dog_id,
            competition_name=require_text(payload.competition_name, "competition_name"),
            competition_date=payload.competition_date,
            location=payload.location,
            rank=payload.rank,
            score=payload.score,
            title_earned=payload.title_earned,
            judge=payload.judge,
            notes=payload.notes,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="CompetitionResult",
        entity_id=result.id,
        after=result,
    )
    await uow.commit()
    return result
