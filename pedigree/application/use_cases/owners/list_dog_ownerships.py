from __future__ import annotations

from uuid import UUID

from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.ownership import Ownership


async def execute(uow: UnitOfWork, dog_id: UUID) -> list[Ownership]:
    if not await uow.dogs.get(dog_id):
        raise NotFound("Dog not found")
    return await uow.ownerships.list_for_dog(dog_id)
