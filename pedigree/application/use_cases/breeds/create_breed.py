from __future__ import annotations

from dataclasses import dataclass

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import require_text
from pedigree.domain.models.breed import Breed
from pedigree.domain.value_objects.audit_action import AuditAction


@dataclass(slots=True)
class BreedInput:
    name: str
    group: str | None = None
    origin: str | None = None
    description: str | None = None
    temperament: str | None = None
    average_lifespan: str | None = None
    average_height: str | None = None
    average_weight: str | None = None


async def execute(uow: UnitOfWork, actor: Actor, payload: BreedInput) -> Breed:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to create breeds")
    name = require_text(payload.name, "name")
    if await uow.breeds.find_by_name(name):
        raise ConflictError("Breed name already exists", details={"name": name})
    breed = await uow.breeds.add(
        Breed.create(
            name=name,
            group=payload.group,
            origin=payload.origin,
            description=payload.description,
            temperament=payload.temperament,
            average_lifespan=payload.average_lifespan,
            average_height=payload.average_height,
            average_weight=payload.average_weight,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="Breed",
        entity_id=breed.id,
        after=breed,
    )
    await uow.commit()
    return breed
