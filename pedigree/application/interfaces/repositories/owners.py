from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.owner import Owner


class OwnerRepository(Protocol):
    async def add(self, owner: Owner) -> Owner: ...

    async def get(self, owner_id: UUID) -> Owner | None: ...

    async def list(
        self, *, limit: int, offset: int = 0, search: str | None = None
    ) -> list[Owner]: ...
