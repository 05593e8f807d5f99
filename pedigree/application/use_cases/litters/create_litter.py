from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.lineage import load_parent
from pedigree.application.validators import ensure_non_negative, require_text
from pedigree.domain.models.litter import Litter
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.gender import Gender


@dataclass(slots=True)
class CreateLitterInput:
    litter_name: str
    sire_id: UUID
    dam_id: UUID
    whelping_date: date
    total_puppies: int | None = None
    male_puppies: int | None = None
    female_puppies: int | None = None
    registration_number: str | None = None
    breeding_record_id: UUID | None = None
    notes: str | None = None


def resolve_total(total: int | None, males: int | None, females: int | None) -> int:
    ensure_non_negative(total, "total_puppies")
    ensure_non_negative(males, "male_puppies")
    ensure_non_negative(females, "female_puppies")
    if males is not None and females is not None:
        counted = males + females
        if total is not None and total != counted:
            raise ValidationError(
                "total_puppies must equal male_puppies + female_puppies",
                details={"total_puppies": total, "male": males, "female": females},
            )
        return counted
    if total is None:
        raise ValidationError("total_puppies is required unless both sex counts are given")
    if (males or 0) > total or (females or 0) > total:
        raise ValidationError("Sex counts cannot exceed total_puppies")
    return total


async def execute(uow: UnitOfWork, actor: Actor, payload: CreateLitterInput) -> Litter:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to register litters")
    total = resolve_total(payload.total_puppies, payload.male_puppies, payload.female_puppies)
    if payload.sire_id == payload.dam_id:
        raise ValidationError("Sire and dam must be different dogs")
    await load_parent(uow, payload.sire_id, Gender.MALE)
    await load_parent(uow, payload.dam_id, Gender.FEMALE)

    if payload.breeding_record_id is not None:
        record = await uow.breeding_records.get(payload.breeding_record_id)
        if not record:
            raise NotFound("Breeding record not found")
        pair = await uow.breeding_pairs.get(record.breeding_pair_id)
        if pair is None or (pair.sire_id, pair.dam_id) != (payload.sire_id, payload.dam_id):
            raise ValidationError("Litter parents do not match the breeding record's pair")

    litter = await uow.litters.add(
        Litter.create(
            litter_name=require_text(payload.litter_name, "litter_name"),
            sire_id=payload.sire_id,
            dam_id=payload.dam_id,
            whelping_date=payload.whelping_date,
            total_puppies=total,
            male_puppies=payload.male_puppies,
            female_puppies=payload.female_puppies,
            registration_number=payload.registration_number,
            breeding_record_id=payload.breeding_record_id,
            notes=payload.notes,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="Litter",
        entity_id=litter.id,
        after=litter,
    )
    await uow.commit()
    return litter
