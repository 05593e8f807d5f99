from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.dog import Dog
from pedigree.domain.models.litter import Litter


@dataclass(slots=True)
class LitterWithPuppies:
    litter: Litter
    puppies: list[Dog]


async def execute(uow: UnitOfWork, litter_id: UUID) -> LitterWithPuppies:
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound("Litter not found")
    puppies = await uow.dogs.list_by_litter(litter_id)
    return LitterWithPuppies(litter=litter, puppies=puppies)
