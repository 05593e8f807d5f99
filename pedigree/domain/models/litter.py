from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Litter:
    id: UUID
    litter_name: str
    sire_id: UUID
    dam_id: UUID
    whelping_date: date
    total_puppies: int
    male_puppies: int | None = None
    female_puppies: int | None = None
    registration_number: str | None = None
    breeding_record_id: UUID | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        litter_name: str,
        sire_id: UUID,
        dam_id: UUID,
        whelping_date: date,
        total_puppies: int,
        male_puppies: int | None = None,
        female_puppies: int | None = None,
        registration_number: str | None = None,
        breeding_record_id: UUID | None = None,
        notes: str | None = None,
    ) -> Litter:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            litter_name=litter_name,
            sire_id=sire_id,
            dam_id=dam_id,
            whelping_date=whelping_date,
            total_puppies=total_puppies,
            male_puppies=male_puppies,
            female_puppies=female_puppies,
            registration_number=registration_number,
            breeding_record_id=breeding_record_id,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
