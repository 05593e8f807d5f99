from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import parse_gender, require_text
from pedigree.domain.models.dog import Dog
from pedigree.domain.models.ownership import Ownership
from pedigree.domain.value_objects.audit_action import AuditAction


@dataclass(slots=True)
class PuppyInput:
    name: str
    gender: str
    color: str | None = None
    microchip_number: str | None = None
    registration_number: str | None = None
    owner_id: UUID | None = None


async def execute(
    uow: UnitOfWork, actor: Actor, litter_id: UUID, puppies: list[PuppyInput]
) -> list[Dog]:
    """Create PENDING dog records for a litter's puppies.

    Each puppy inherits the litter's breed (from the dam), parents and whelping
    date. A puppy with an owner gets its initial current ownership in the same
    transaction.
    """
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to register puppies")
    if not puppies:
        raise ValidationError("At least one puppy is required")
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound("Litter not found")
    registered = await uow.dogs.count_by_litter(litter_id)
    if registered + len(puppies) > litter.total_puppies:
        raise ConflictError(
            "Registering these puppies would exceed the litter size",
            details={
                "total_puppies": litter.total_puppies,
                "registered": registered,
                "requested": len(puppies),
            },
        )
    dam = await uow.dogs.get(litter.dam_id)
    if dam is None:
        raise NotFound("Dam not found")

    owner_ids = {p.owner_id for p in puppies if p.owner_id is not None}
    for owner_id in owner_ids:
        if not await uow.owners.get(owner_id):
            raise NotFound("Owner not found", details={"owner_id": str(owner_id)})

    created: list[Dog] = []
    for puppy in puppies:
        dog = await uow.dogs.add(
            Dog.create(
                name=require_text(puppy.name, "name"),
                breed=dam.breed,
                breed_id=dam.breed_id,
                gender=parse_gender(puppy.gender),
                date_of_birth=litter.whelping_date,
                color=puppy.color,
                microchip_number=puppy.microchip_number,
                registration_number=puppy.registration_number,
                sire_id=litter.sire_id,
                dam_id=litter.dam_id,
                litter_id=litter.id,
                created_by=actor.user_id,
            )
        )
        if puppy.owner_id is not None:
            await uow.ownerships.add(
                Ownership.create(
                    owner_id=puppy.owner_id, dog_id=dog.id, start_date=litter.whelping_date
                )
            )
        created.append(dog)

    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="Litter",
        entity_id=litter.id,
        metadata={"registered_puppy_ids": [str(dog.id) for dog in created]},
    )
    await uow.commit()
    return created
