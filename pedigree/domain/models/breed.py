from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Breed:
    id: UUID
    name: str
    group: str | None = None
    origin: str | None = None
    description: str | None = None
    temperament: str | None = None
    average_lifespan: str | None = None
    average_height: str | None = None
    average_weight: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        group: str | None = None,
        origin: str | None = None,
        description: str | None = None,
        temperament: str | None = None,
        average_lifespan: str | None = None,
        average_height: str | None = None,
        average_weight: str | None = None,
    ) -> Breed:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            group=group,
            origin=origin,
            description=description,
            temperament=temperament,
            average_lifespan=average_lifespan,
            average_height=average_height,
            average_weight=average_weight,
            created_at=now,
            updated_at=now,
        )
