from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.use_cases.events.create_event import EVENT_MANAGERS
from pedigree.application.validators import parse_enum, require_text
from pedigree.domain.models.event import Event
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.event_type import EventType

UPDATABLE_FIELDS = (
    "title",
    "description",
    "event_type",
    "start_date",
    "end_date",
    "location",
    "organizer",
    "club_id",
    "registration_deadline",
)


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes for timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(slots=True)
class UpdateEventInput:
    title: str | None = None
    description: str | None = None
    event_type: str | EventType | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = None
    organizer: str | None = None
    club_id: UUID | None = None
    registration_deadline: datetime | None = None


async def execute(
    uow: UnitOfWork, actor: Actor, event_id: UUID, payload: UpdateEventInput
) -> Event:
    if actor.role not in EVENT_MANAGERS:
        raise Forbidden("Only administrators and club accounts can update events")
    existing = await uow.events.get(event_id)
    if not existing:
        raise NotFound("Event not found")
    data = {
        name: getattr(payload, name)
        for name in UPDATABLE_FIELDS
        if getattr(payload, name) is not None
    }
    if not data:
        return existing

    for name in ("title", "location", "organizer"):
        if name in data:
            data[name] = require_text(data[name], name)
    if "event_type" in data:
        data["event_type"] = parse_enum(EventType, data["event_type"], "event_type")
    # Dates are checked against the merged result, not just the fields sent
    start_date = _as_utc(data.get("start_date", existing.start_date))
    end_date = _as_utc(data.get("end_date", existing.end_date))
    deadline = _as_utc(data.get("registration_deadline", existing.registration_deadline))
    if end_date < start_date:
        raise ValidationError("end_date cannot be before start_date")
    if deadline and deadline > end_date:
        raise ValidationError("registration_deadline cannot be after the event ends")
    if "club_id" in data and not await uow.clubs.get(data["club_id"]):
        raise NotFound("Club not found")

    data["updated_at"] = datetime.now(timezone.utc)
    updated = await uow.events.update(event_id, data)
    if not updated:
        raise NotFound("Event not found")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="Event",
        entity_id=event_id,
        before=existing,
        after=updated,
        metadata={"changed_fields": sorted(k for k in data if k != "updated_at")},
    )
    await uow.commit()
    return updated
