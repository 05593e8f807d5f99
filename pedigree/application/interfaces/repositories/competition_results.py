from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.competition_result import CompetitionResult


class CompetitionResultRepository(Protocol):
    async def add(self, result: CompetitionResult) -> CompetitionResult: ...

    async def list_for_dog(self, dog_id: UUID) -> list[CompetitionResult]: ...

    async def get(self, result_id: UUID) -> CompetitionResult | None: ...

    async def update(self, result_id: UUID, data: dict) -> CompetitionResult | None: ...

    async def delete(self, result_id: UUID) -> bool: ...
