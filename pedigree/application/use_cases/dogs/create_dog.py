from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.lineage import ensure_valid_parents
from pedigree.application.validators import parse_gender, require_text
from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.gender import Gender


@dataclass(slots=True)
class CreateDogInput:
    name: str
    breed: str | None
    gender: str | Gender
    date_of_birth: date
    date_of_death: date | None = None
    registration_number: str | None = None
    microchip_number: str | None = None
    color: str | None = None
    titles: list[str] | None = None
    is_neutered: bool = False
    biography: str | None = None
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    litter_id: UUID | None = None
    breed_id: UUID | None = None


def ensure_can_create(actor: Actor) -> None:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to register dogs")


def ensure_life_dates(date_of_birth: date, date_of_death: date | None) -> None:
    if date_of_death is not None and date_of_death < date_of_birth:
        raise ValidationError(
            "date_of_death cannot be before date_of_birth",
            details={"date_of_birth": str(date_of_birth), "date_of_death": str(date_of_death)},
        )


async def resolve_breed(
    uow: UnitOfWork, breed: str | None, breed_id: UUID | None
) -> tuple[str, UUID | None]:
    """Return the breed name to store and the registry breed it links to, if any.

    An explicit ``breed_id`` wins and supplies the canonical name. A bare name is
    linked when it matches a registered breed case-insensitively and kept as free
    text otherwise.
    """
    if breed_id is not None:
        registered = await uow.breeds.get(breed_id)
        if not registered:
            raise NotFound("Breed not found", details={"breed_id": str(breed_id)})
        if breed is not None and breed.strip().lower() != registered.name.lower():
            raise ValidationError(
                "breed does not match the referenced breed",
                details={"breed": breed, "breed_id": str(breed_id)},
            )
        return registered.name, registered.id
    name = require_text(breed, "breed")
    registered = await uow.breeds.find_by_name(name)
    if registered:
        return registered.name, registered.id
    return name, None


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    payload: CreateDogInput,
    *,
    max_generations: int,
) -> Dog:
    ensure_can_create(actor)
    ensure_life_dates(payload.date_of_birth, payload.date_of_death)
    breed, breed_id = await resolve_breed(uow, payload.breed, payload.breed_id)
    await ensure_valid_parents(
        uow,
        dog_id=None,
        sire_id=payload.sire_id,
        dam_id=payload.dam_id,
        max_generations=max_generations,
    )
    dog = Dog.create(
        name=require_text(payload.name, "name"),
        breed=breed,
        breed_id=breed_id,
        gender=parse_gender(payload.gender),
        date_of_birth=payload.date_of_birth,
        date_of_death=payload.date_of_death,
        registration_number=payload.registration_number,
        microchip_number=payload.microchip_number,
        color=payload.color,
        titles=payload.titles,
        is_neutered=payload.is_neutered,
        biography=payload.biography,
        sire_id=payload.sire_id,
        dam_id=payload.dam_id,
        litter_id=payload.litter_id,
        created_by=actor.user_id,
    )
    created = await uow.dogs.add(dog)
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="Dog",
        entity_id=created.id,
        after=created,
    )
    await uow.commit()
    return created
