from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from pedigree.domain.models.ownership import Ownership


class OwnershipRepository(Protocol):
    async def add(self, ownership: Ownership) -> Ownership: ...

    async def get_current(self, dog_id: UUID) -> Ownership | None: ...

    async def close_current(
        self,
        dog_id: UUID,
        *,
        end_date: date,
        expected_owner_id: UUID | None = None,
    ) -> Ownership | None:
        """Close the dog's current row in one conditional statement.

        Returns the closed row, or None when no current row matched (none exists,
        another transaction closed it first, or the owner differs).
        """
        ...

    async def list_for_dog(self, dog_id: UUID) -> list[Ownership]: ...

    async def list_for_owner(
        self,
        owner_id: UUID,
        *,
        include_former: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Ownership]: ...
