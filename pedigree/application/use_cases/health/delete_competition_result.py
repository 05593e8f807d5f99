from __future__ import annotations

from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.use_cases.health.update_competition_result import load_for_dog
from pedigree.domain.value_objects.audit_action import AuditAction


async def execute(uow: UnitOfWork, actor: Actor, dog_id: UUID, result_id: UUID) -> None:
    if not actor.role.can_delete():
        raise Forbidden("Role not allowed to delete competition results")
    existing = await load_for_dog(uow, dog_id, result_id)
    if not await uow.competition_results.delete(result_id):
        raise NotFound("Competition result not found")
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.DELETE,
        entity_type="CompetitionResult",
        entity_id=result_id,
        before=existing,
        metadata={"dog_id": str(dog_id)},
    )
    await uow.commit()
