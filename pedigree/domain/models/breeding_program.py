from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class BreedingProgram:
    id: UUID
    name: str
    breed: str
    breeder_id: UUID
    start_date: date
    description: str | None = None
    goals: list[str] = field(default_factory=list)
    end_date: date | None = None
    is_active: bool = True
    foundation_dog_ids: list[UUID] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        breed: str,
        breeder_id: UUID,
        start_date: date,
        description: str | None = None,
        goals: list[str] | None = None,
        end_date: date | None = None,
        foundation_dog_ids: list[UUID] | None = None,
    ) -> BreedingProgram:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            breed=breed,
            breeder_id=breeder_id,
            start_date=start_date,
            description=description,
            goals=list(goals or []),
            end_date=end_date,
            is_active=True,
            foundation_dog_ids=list(foundation_dog_ids or []),
            created_at=now,
            updated_at=now,
        )
