from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Club:
    id: UUID
    name: str
    description: str | None = None
    established_date: date | None = None
    location: str | None = None
    contact_email: str | None = None
    website_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None = None,
        established_date: date | None = None,
        location: str | None = None,
        contact_email: str | None = None,
        website_url: str | None = None,
    ) -> Club:
        return cls(
            id=uuid4(),
            name=name,
            description=description,
            established_date=established_date,
            location=location,
            contact_email=contact_email,
            website_url=website_url,
        )
