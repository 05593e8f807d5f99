from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.breed import Breed


class BreedRepository(Protocol):
    async def add(self, breed: Breed) -> Breed: ...

    async def get(self, breed_id: UUID) -> Breed | None: ...

    async def find_by_name(self, name: str) -> Breed | None: ...

    async def list(
        self, *, limit: int, offset: int = 0, search: str | None = None
    ) -> list[Breed]: ...

    async def update(self, breed_id: UUID, data: dict) -> Breed | None: ...

    async def delete(self, breed_id: UUID) -> bool: ...
