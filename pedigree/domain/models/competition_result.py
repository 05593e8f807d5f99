from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class CompetitionResult:
    id: UUID
    dog_id: UUID
    competition_name: str
    competition_date: date
    location: str | None = None
    rank: int | None = None
    score: float | None = None
    title_earned: str | None = None
    judge: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        dog_id: UUID,
        competition_name: str,
        competition_date: date,
        location: str | None = None,
        rank: int | None = None,
        score: float | None = None,
        title_earned: str | None = None,
        judge: str | None = None,
        notes: str | None = None,
    ) -> CompetitionResult:
        return cls(
            id=uuid4(),
            dog_id=dog_id,
            competition_name=competition_name,
            competition_date=competition_date,
            location=location,
            rank=rank,
            score=score,
            title_earned=title_earned,
            judge=judge,
            notes=notes,
        )
