from __future__ import annotations

from uuid import UUID

from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.breed import Breed


async def get_breed(uow: UnitOfWork, breed_id: UUID) -> Breed:
    breed = await uow.breeds.get(breed_id)
    if not breed:
        raise NotFound("Breed not found")
    return breed


async def get_breed_by_name(uow: UnitOfWork, name: str) -> Breed:
    breed = await uow.breeds.find_by_name(name)
    if not breed:
        raise NotFound("Breed not found", details={"name": name})
    return breed


async def list_breeds(
    uow: UnitOfWork, *, limit: int, offset: int = 0, search: str | None = None
) -> list[Breed]:
    return await uow.breeds.list(limit=limit, offset=offset, search=search)
