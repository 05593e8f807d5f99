from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.breeding_record import BreedingRecord
from pedigree.domain.value_objects.parent_role import ParentRole


class BreedingRecordRepository(Protocol):
    async def add(self, record: BreedingRecord) -> BreedingRecord: ...

    async def get(self, record_id: UUID) -> BreedingRecord | None: ...

    async def update(
        self, record_id: UUID, data: dict, expected_version: int
    ) -> BreedingRecord | None: ...

    async def add_puppy(self, record_id: UUID, puppy_id: UUID) -> None: ...

    async def count_puppies(self, record_id: UUID) -> int: ...

    async def list_for_dog(
        self,
        dog_id: UUID,
        *,
        role: ParentRole = ParentRole.BOTH,
        limit: int = 20,
        offset: int = 0,
    ) -> list[BreedingRecord]: ...

    async def find_completed_for_puppy(self, puppy_id: UUID) -> BreedingRecord | None: ...
