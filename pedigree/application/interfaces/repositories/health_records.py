from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.health_record import HealthRecord


class HealthRecordRepository(Protocol):
    async def add(self, record: HealthRecord) -> HealthRecord: ...

    async def list_for_dog(self, dog_id: UUID) -> list[HealthRecord]: ...

    async def get(self, record_id: UUID) -> HealthRecord | None: ...

    async def update(self, record_id: UUID, data: dict) -> HealthRecord | None: ...

    async def delete(self, record_id: UUID) -> bool: ...
