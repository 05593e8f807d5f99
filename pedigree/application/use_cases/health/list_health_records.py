from __future__ import annotations

from uuid import UUID

from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.health_record import HealthRecord


async def execute(uow: UnitOfWork, dog_id: UUID) -> list[HealthRecord]:
    if not await uow.dogs.get(dog_id):
        raise NotFound("Dog not found")
    return await uow.health_records.list_for_dog(dog_id)
