from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import parse_enum, require_text
from pedigree.domain.models.event import Event
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.event_type import EventType
from pedigree.domain.value_objects.role import Role

EVENT_MANAGERS = (Role.ADMIN, Role.CLUB)


@dataclass(slots=True)
class CreateEventInput:
    title: str
    description: str
    event_type: str | EventType
    start_date: datetime
    end_date: datetime
    location: str
    organizer: str
    club_id: UUID | None = None
    registration_deadline: datetime | None = None


async def execute(uow: UnitOfWork, actor: Actor, payload: CreateEventInput) -> Event:
    if actor.role not in EVENT_MANAGERS:
        raise Forbidden("Only administrators and club accounts can create events")
    event_type = parse_enum(EventType, payload.event_type, "event_type")
    if payload.end_date < payload.start_date:
        raise ValidationError("end_date cannot be before start_date")
    if payload.registration_deadline and payload.registration_deadline > payload.end_date:
        raise ValidationError("registration_deadline cannot be after the event ends")
    if payload.club_id is not None and not await uow.clubs.get(payload.club_id):
        raise NotFound("Club not found")

    event = await uow.events.add(
        Event.create(
            title=require_text(payload.title, "title"),
            description=payload.description,
            event_type=event_type,
            start_date=payload.start_date,
            end_date=payload.end_date,
            location=require_text(payload.location, "location"),
            organizer=require_text(payload.organizer, "organizer"),
            club_id=payload.club_id,
            registration_deadline=payload.registration_deadline,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="Event",
        entity_id=event.id,
        after=event,
    )
    await uow.commit()
    return event
