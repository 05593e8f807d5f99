from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.breeding_pair import BreedingPair


class BreedingPairRepository(Protocol):
    async def add(self, pair: BreedingPair) -> BreedingPair: ...

    async def get(self, pair_id: UUID) -> BreedingPair | None: ...

    async def find_active(
        self, sire_id: UUID, dam_id: UUID, program_id: UUID | None
    ) -> BreedingPair | None: ...

    async def list_for_program(self, program_id: UUID) -> list[BreedingPair]: ...

    async def update(
        self, pair_id: UUID, data: dict, expected_version: int
    ) -> BreedingPair | None: ...

    async def count_for_dog(self, dog_id: UUID) -> int: ...
