from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.breeding_program import BreedingProgram


class BreedingProgramRepository(Protocol):
    async def add(self, program: BreedingProgram) -> BreedingProgram: ...

    async def get(self, program_id: UUID) -> BreedingProgram | None: ...

    async def list(
        self,
        *,
        limit: int,
        offset: int = 0,
        search: str | None = None,
        breeder_id: UUID | None = None,
        breed: str | None = None,
        is_active: bool | None = None,
    ) -> list[BreedingProgram]: ...
