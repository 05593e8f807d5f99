from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import ensure_page
from pedigree.domain.models.dog import Dog
from pedigree.domain.models.ownership import Ownership


@dataclass(slots=True)
class OwnedDog:
    dog: Dog
    ownership: Ownership


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    *,
    include_former: bool = False,
    limit: int = 20,
    offset: int = 0,
) -> list[OwnedDog]:
    ensure_page(limit, offset)
    if not await uow.owners.get(owner_id):
        raise NotFound("Owner not found")
    ownerships = await uow.ownerships.list_for_owner(
        owner_id, include_former=include_former, limit=limit, offset=offset
    )
    dogs = {dog.id: dog for dog in await uow.dogs.get_many(o.dog_id for o in ownerships)}
    return [
        OwnedDog(dog=dogs[o.dog_id], ownership=o) for o in ownerships if o.dog_id in dogs
    ]
