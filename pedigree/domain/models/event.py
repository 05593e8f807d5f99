from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from pedigree.domain.value_objects.event_type import EventType


@dataclass(slots=True)
class Event:
    id: UUID
    title: str
    description: str
    event_type: EventType
    start_date: datetime
    end_date: datetime
    location: str
    organizer: str
    club_id: UUID | None = None
    registration_deadline: datetime | None = None
    is_published: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        event_type: EventType,
        start_date: datetime,
        end_date: datetime,
        location: str,
        organizer: str,
        club_id: UUID | None = None,
        registration_deadline: datetime | None = None,
    ) -> Event:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            title=title,
            description=description,
            event_type=event_type,
            start_date=start_date,
            end_date=end_date,
            location=location,
            organizer=organizer,
            club_id=club_id,
            registration_deadline=registration_deadline,
            is_published=False,
            created_at=now,
            updated_at=now,
        )


@dataclass(slots=True)
class EventRegistration:
    event_id: UUID
    dog_id: UUID
    registration_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: int | None = None
