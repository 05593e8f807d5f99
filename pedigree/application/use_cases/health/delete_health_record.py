from __future__ import annotations

import logging
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.use_cases.health.update_health_record import load_for_dog
from pedigree.domain.value_objects.audit_action import AuditAction

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, actor: Actor, dog_id: UUID, record_id: UUID) -> None:
    if not actor.role.can_delete():
        raise Forbidden("Role not allowed to delete health records")
    existing = await load_for_dog(uow, dog_id, record_id)
    logger.warning("Deleting health record %s of dog %s", record_id, dog_id)
    if not await uow.health_records.delete(record_id):
        raise NotFound("Health record not found")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.DELETE,
        entity_type="HealthRecord",
        entity_id=record_id,
        before=existing,
        metadata={"dog_id": str(dog_id)},
    )
    await uow.commit()
