from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from pedigree.domain.models.event import Event, EventRegistration
from pedigree.domain.value_objects.event_type import EventType


class EventRepository(Protocol):
    async def add(self, event: Event) -> Event: ...

    async def get(self, event_id: UUID) -> Event | None: ...

    async def set_published(self, event_id: UUID, is_published: bool) -> Event | None: ...

    async def add_registration(self, registration: EventRegistration) -> EventRegistration: ...

    async def get_registration(self, event_id: UUID, dog_id: UUID) -> EventRegistration | None: ...

    async def list_registrations(self, event_id: UUID) -> list[EventRegistration]: ...

    async def list(
        self,
        *,
        limit: int,
        offset: int = 0,
        search: str | None = None,
        event_type: EventType | None = None,
        starts_from: datetime | None = None,
        ends_before: datetime | None = None,
        club_id: UUID | None = None,
        published_only: bool = True,
    ) -> list[Event]: ...

    async def update(self, event_id: UUID, data: dict) -> Event | None: ...
