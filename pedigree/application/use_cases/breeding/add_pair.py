from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.lineage import load_parent
from pedigree.application.validators import ensure_fraction
from pedigree.domain.models.breeding_pair import BreedingPair
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.gender import Gender


@dataclass(slots=True)
class AddPairInput:
    sire_id: UUID
    dam_id: UUID
    program_id: UUID | None = None
    planned_breeding_date: date | None = None
    compatibility_notes: str | None = None
    genetic_compatibility_score: float | None = None


async def execute(uow: UnitOfWork, actor: Actor, payload: AddPairInput) -> BreedingPair:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to plan breeding pairs")
    if payload.sire_id == payload.dam_id:
        raise ValidationError("Sire and dam must be different dogs")
    ensure_fraction(payload.genetic_compatibility_score, "genetic_compatibility_score")
    if payload.program_id is not None and not await uow.breeding_programs.get(payload.program_id):
        raise NotFound("Breeding program not found")
    await load_parent(uow, payload.sire_id, Gender.MALE)
    await load_parent(uow, payload.dam_id, Gender.FEMALE)

    # The partial unique index cannot see NULL program ids, so check here too
    existing = await uow.breeding_pairs.find_active(
        payload.sire_id, payload.dam_id, payload.program_id
    )
    if existing:
        raise ConflictError(
            "An active breeding pair already exists for this sire and dam",
            details={"breeding_pair_id": str(existing.id)},
        )

    pair = await uow.breeding_pairs.add(
        BreedingPair.create(
            sire_id=payload.sire_id,
            dam_id=payload.dam_id,
            program_id=payload.program_id,
            planned_breeding_date=payload.planned_breeding_date,
            compatibility_notes=payload.compatibility_notes,
            genetic_compatibility_score=payload.genetic_compatibility_score,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="BreedingPair",
        entity_id=pair.id,
        after=pair,
    )
    await uow.commit()
    return pair
