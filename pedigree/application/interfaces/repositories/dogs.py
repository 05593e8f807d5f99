from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.approval_status import ApprovalStatus

ParentLinks = dict[UUID, tuple[UUID | None, UUID | None]]


class DogRepository(Protocol):
    async def add(self, dog: Dog) -> Dog: ...

    async def get(self, dog_id: UUID) -> Dog | None: ...

    async def get_many(self, dog_ids: Iterable[UUID]) -> list[Dog]: ...

    async def list(
        self,
        *,
        limit: int,
        offset: int = 0,
        breed: str | None = None,
        approval_status: ApprovalStatus | None = None,
        search: str | None = None,
    ) -> list[Dog]: ...

    async def count(
        self,
        *,
        breed: str | None = None,
        approval_status: ApprovalStatus | None = None,
        search: str | None = None,
    ) -> int: ...

    async def update(self, dog_id: UUID, data: dict, expected_version: int) -> Dog | None: ...

    async def delete(self, dog_id: UUID) -> bool: ...

    async def get_parent_links(self, dog_ids: Iterable[UUID]) -> ParentLinks: ...

    async def list_by_litter(self, litter_id: UUID) -> list[Dog]: ...

    async def count_by_litter(self, litter_id: UUID) -> int: ...

    async def count_offspring(self, dog_id: UUID) -> int: ...

    async def count_by_breed(self, breed_id: UUID) -> int: ...

    async def rename_breed(self, breed_id: UUID, name: str) -> int: ...
