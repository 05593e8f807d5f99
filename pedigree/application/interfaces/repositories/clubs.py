from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.club import Club


class ClubRepository(Protocol):
    async def add(self, club: Club) -> Club: ...

    async def get(self, club_id: UUID) -> Club | None: ...
