from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.use_cases.events.create_event import EVENT_MANAGERS
from pedigree.application.validators import parse_enum
from pedigree.domain.models.event import Event, EventRegistration
from pedigree.domain.value_objects.event_type import EventType


async def get_event(uow: UnitOfWork, event_id: UUID) -> Event:
    event = await uow.events.get(event_id)
    if not event:
        raise NotFound("Event not found")
    return event


async def list_registrations(uow: UnitOfWork, event_id: UUID) -> list[EventRegistration]:
    await get_event(uow, event_id)
    return await uow.events.list_registrations(event_id)


async def list_events(
    uow: UnitOfWork,
    actor: Actor | None,
    *,
    limit: int,
    offset: int = 0,
    search: str | None = None,
    event_type: str | EventType | None = None,
    starts_from: datetime | None = None,
    ends_before: datetime | None = None,
    club_id: UUID | None = None,
    include_unpublished: bool = False,
) -> list[Event]:
    """Published events for everyone; drafts only for event managers who ask for them."""
    if include_unpublished and (actor is None or actor.role not in EVENT_MANAGERS):
        raise Forbidden("Only administrators and club accounts can see unpublished events")
    return await uow.events.list(
        limit=limit,
        offset=offset,
        search=search,
        event_type=parse_enum(EventType, event_type, "event_type") if event_type else None,
        starts_from=starts_from,
        ends_before=ends_before,
        club_id=club_id,
        published_only=not include_unpublished,
    )
