from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.event import EventRegistration
from pedigree.domain.value_objects.audit_action import AuditAction


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


async def execute(
    uow: UnitOfWork, actor: Actor, event_id: UUID, dog_id: UUID
) -> EventRegistration:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to register dogs for events")
    event = await uow.events.get(event_id)
    if not event:
        raise NotFound("Event not found")
    if not event.is_published:
        raise ValidationError("Event is not open for registration")
    now = datetime.now(timezone.utc)
    if event.registration_deadline and _as_utc(event.registration_deadline) < now:
        raise ValidationError("Registration deadline has passed")
    if not await uow.dogs.get(dog_id):
        raise NotFound("Dog not found")
    if await uow.events.get_registration(event_id, dog_id):
        raise ConflictError("Dog is already registered for this event")

    registration = await uow.events.add_registration(
        EventRegistration(event_id=event_id, dog_id=dog_id, registration_date=now)
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="EventRegistration",
        entity_id=str(registration.id),
        after=registration,
    )
    await uow.commit()
    return registration
