from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.lineage import ensure_valid_parents
from pedigree.application.use_cases.dogs.create_dog import ensure_life_dates, resolve_breed
from pedigree.application.validators import parse_gender, require_text
from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.audit_action import AuditAction

UPDATABLE_FIELDS = (
    "name",
    "breed",
    "gender",
    "date_of_birth",
    "date_of_death",
    "registration_number",
    "microchip_number",
    "color",
    "titles",
    "is_neutered",
    "biography",
    "sire_id",
    "dam_id",
    "litter_id",
    "breed_id",
)


@dataclass(slots=True)
class UpdateDogInput:
    version: int
    name: str | None = None
    breed: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None
    date_of_death: date | None = None
    registration_number: str | None = None
    microchip_number: str | None = None
    color: str | None = None
    titles: list[str] | None = None
    is_neutered: bool | None = None
    biography: str | None = None
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    litter_id: UUID | None = None
    breed_id: UUID | None = None


def ensure_can_update(actor: Actor) -> None:
    if not actor.role.can_update():
        raise Forbidden("Role not allowed to update dogs")


async def ensure_gender_unreferenced(uow: UnitOfWork, dog_id: UUID) -> None:
    """Gender is fixed once the dog stands as a sire or dam anywhere."""
    references = {
        "offspring": await uow.dogs.count_offspring(dog_id),
        "breeding_pairs": await uow.breeding_pairs.count_for_dog(dog_id),
        "litters": await uow.litters.count_for_dog(dog_id),
    }
    if any(references.values()):
        raise ConflictError(
            "Cannot change the gender of a dog used as a parent",
            details={name: count for name, count in references.items() if count},
        )


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    dog_id: UUID,
    payload: UpdateDogInput,
    *,
    max_generations: int,
) -> Dog:
    ensure_can_update(actor)
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.dogs.get(dog_id)
    if not existing:
        raise NotFound("Dog not found")

    data: dict = {}
    for field_name in UPDATABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data:
        return existing

    if "name" in data:
        data["name"] = require_text(data["name"], "name")
    if "breed" in data or "breed_id" in data:
        data["breed"], data["breed_id"] = await resolve_breed(
            uow, data.get("breed"), data.get("breed_id")
        )
    if "gender" in data:
        data["gender"] = parse_gender(data["gender"])
        if data["gender"] is not existing.gender:
            await ensure_gender_unreferenced(uow, dog_id)
    ensure_life_dates(
        data.get("date_of_birth", existing.date_of_birth),
        data.get("date_of_death", existing.date_of_death),
    )
    if "sire_id" in data or "dam_id" in data:
        await ensure_valid_parents(
            uow,
            dog_id=dog_id,
            sire_id=data.get("sire_id", existing.sire_id),
            dam_id=data.get("dam_id", existing.dam_id),
            max_generations=max_generations,
        )

    data["updated_at"] = datetime.now(timezone.utc)
    updated = await uow.dogs.update(dog_id, data, expected_version=payload.version)
    if not updated:
        raise ConflictError("Version mismatch while updating dog")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="Dog",
        entity_id=dog_id,
        before=existing,
        after=updated,
        metadata={"changed_fields": sorted(k for k in data if k != "updated_at")},
    )
    await uow.commit()
    return updated
