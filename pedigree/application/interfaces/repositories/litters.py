from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.litter import Litter


class LitterRepository(Protocol):
    async def add(self, litter: Litter) -> Litter: ...

    async def get(self, litter_id: UUID) -> Litter | None: ...

    async def count_for_dog(self, dog_id: UUID) -> int: ...
