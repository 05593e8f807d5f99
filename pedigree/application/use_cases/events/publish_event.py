from __future__ import annotations

from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.use_cases.events.create_event import EVENT_MANAGERS
from pedigree.domain.models.event import Event
from pedigree.domain.value_objects.audit_action import AuditAction


async def execute(
    uow: UnitOfWork, actor: Actor, event_id: UUID, is_published: bool = True
) -> Event:
    if actor.role not in EVENT_MANAGERS:
        raise Forbidden("Only administrators and club accounts can publish events")
    existing = await uow.events.get(event_id)
    if not existing:
        raise NotFound("Event not found")
    if existing.is_published == is_published:
        return existing
    updated = await uow.events.set_published(event_id, is_published)
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="Event",
        entity_id=event_id,
        before=existing,
        after=updated,
    )
    await uow.commit()
    return updated
