from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import require_text
from pedigree.domain.models.breeding_program import BreedingProgram
from pedigree.domain.value_objects.audit_action import AuditAction


@dataclass(slots=True)
class CreateProgramInput:
    name: str
    breed: str
    breeder_id: UUID
    start_date: date
    description: str | None = None
    goals: list[str] | None = None
    end_date: date | None = None
    foundation_dog_ids: list[UUID] | None = None


async def execute(uow: UnitOfWork, actor: Actor, payload: CreateProgramInput) -> BreedingProgram:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to create breeding programs")
    if payload.end_date is not None and payload.end_date < payload.start_date:
        raise ValidationError("end_date cannot be before start_date")
    if not await uow.owners.get(payload.breeder_id):
        raise NotFound("Breeder not found")

    foundation = list(dict.fromkeys(payload.foundation_dog_ids or []))
    if foundation:
        found = {dog.id for dog in await uow.dogs.get_many(foundation)}
        missing = [str(dog_id) for dog_id in foundation if dog_id not in found]
        if missing:
            raise NotFound("Foundation dog not found", details={"ids": missing})

    program = await uow.breeding_programs.add(
        BreedingProgram.create(
            name=require_text(payload.name, "name"),
            breed=require_text(payload.breed, "breed"),
            breeder_id=payload.breeder_id,
            start_date=payload.start_date,
            description=payload.description,
            goals=payload.goals,
            end_date=payload.end_date,
            foundation_dog_ids=foundation,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="BreedingProgram",
        entity_id=program.id,
        after=program,
    )
    await uow.commit()
    return program
