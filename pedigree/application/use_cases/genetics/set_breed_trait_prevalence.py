from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import ensure_fraction, require_text
from pedigree.domain.models.dog_genotype import BreedTraitPrevalence
from pedigree.domain.value_objects.audit_action import AuditAction


@dataclass(slots=True)
class PrevalenceInput:
    breed: str
    trait_id: UUID
    frequency: float
    study_reference: str | None = None


async def execute(uow: UnitOfWork, actor: Actor, payload: PrevalenceInput) -> BreedTraitPrevalence:
    if not actor.role.can_review():
        raise Forbidden("Only administrators can set breed prevalence data")
    if payload.frequency is None:
        raise ValidationError("frequency is required")
    ensure_fraction(payload.frequency, "frequency")
    breed = require_text(payload.breed, "breed")
    if not await uow.genetics.get_trait(payload.trait_id):
        raise NotFound("Genetic trait not found")

    previous = await uow.genetics.get_prevalence(breed, payload.trait_id)
    saved = await uow.genetics.save_prevalence(
        BreedTraitPrevalence.create(
            breed=breed,
            trait_id=payload.trait_id,
            frequency=payload.frequency,
            study_reference=payload.study_reference,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE if previous else AuditAction.CREATE,
        entity_type="BreedTraitPrevalence",
        entity_id=saved.id,
        before=previous,
        after=saved,
    )
    await uow.commit()
    return saved
