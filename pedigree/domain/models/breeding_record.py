from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from pedigree.domain.value_objects.breeding_record_status import BreedingRecordStatus


@dataclass(slots=True)
class BreedingRecord:
    id: UUID
    breeding_pair_id: UUID
    breeding_date: date
    litter_size: int | None = None
    status: BreedingRecordStatus = BreedingRecordStatus.PLANNED
    comments: str | None = None
    puppy_ids: list[UUID] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        breeding_pair_id: UUID,
        breeding_date: date,
        litter_size: int | None = None,
        comments: str | None = None,
    ) -> BreedingRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            breeding_pair_id=breeding_pair_id,
            breeding_date=breeding_date,
            litter_size=litter_size,
            status=BreedingRecordStatus.PLANNED,
            comments=comments,
            created_at=now,
            updated_at=now,
            version=1,
        )
