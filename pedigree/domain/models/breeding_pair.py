from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from pedigree.domain.value_objects.breeding_pair_status import BreedingPairStatus


@dataclass(slots=True)
class BreedingPair:
    id: UUID
    sire_id: UUID
    dam_id: UUID
    program_id: UUID | None = None
    planned_breeding_date: date | None = None
    compatibility_notes: str | None = None
    genetic_compatibility_score: float | None = None
    status: BreedingPairStatus = BreedingPairStatus.PLANNED
    status_notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        sire_id: UUID,
        dam_id: UUID,
        program_id: UUID | None = None,
        planned_breeding_date: date | None = None,
        compatibility_notes: str | None = None,
        genetic_compatibility_score: float | None = None,
    ) -> BreedingPair:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            sire_id=sire_id,
            dam_id=dam_id,
            program_id=program_id,
            planned_breeding_date=planned_breeding_date,
            compatibility_notes=compatibility_notes,
            genetic_compatibility_score=genetic_compatibility_score,
            status=BreedingPairStatus.PLANNED,
            created_at=now,
            updated_at=now,
            version=1,
        )
