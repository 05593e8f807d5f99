from __future__ import annotations

from uuid import UUID

from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.owner import Owner


async def execute(uow: UnitOfWork, owner_id: UUID) -> Owner:
    owner = await uow.owners.get(owner_id)
    if not owner:
        raise NotFound("Owner not found")
    return owner
