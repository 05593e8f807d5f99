from __future__ import annotations

from uuid import UUID

from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import ensure_page, parse_enum
from pedigree.domain.models.breeding_record import BreedingRecord
from pedigree.domain.value_objects.parent_role import ParentRole


async def execute(
    uow: UnitOfWork,
    dog_id: UUID,
    *,
    role: str | ParentRole = ParentRole.BOTH,
    limit: int = 20,
    offset: int = 0,
) -> list[BreedingRecord]:
    ensure_page(limit, offset)
    parent_role = parse_enum(ParentRole, role, "role")
    if not await uow.dogs.get(dog_id):
        raise NotFound("Dog not found")
    return await uow.breeding_records.list_for_dog(
        dog_id, role=parent_role, limit=limit, offset=offset
    )
