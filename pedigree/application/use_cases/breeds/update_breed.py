from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import require_text
from pedigree.domain.models.breed import Breed
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role

UPDATABLE_FIELDS = (
    "name",
    "group",
    "origin",
    "description",
    "temperament",
    "average_lifespan",
    "average_height",
    "average_weight",
)


@dataclass(slots=True)
class UpdateBreedInput:
    name: str | None = None
    group: str | None = None
    origin: str | None = None
    description: str | None = None
    temperament: str | None = None
    average_lifespan: str | None = None
    average_height: str | None = None
    average_weight: str | None = None


async def execute(
    uow: UnitOfWork, actor: Actor, breed_id: UUID, payload: UpdateBreedInput
) -> Breed:
    actor.require(Role.ADMIN)
    existing = await uow.breeds.get(breed_id)
    if not existing:
        raise NotFound("Breed not found")
    data = {
        name: getattr(payload, name)
        for name in UPDATABLE_FIELDS
        if getattr(payload, name) is not None
    }
    if not data:
        return existing
    if "name" in data:
        data["name"] = require_text(data["name"], "name")
        clash = await uow.breeds.find_by_name(data["name"])
        if clash and clash.id != breed_id:
            raise ConflictError(
                "Another breed already uses this name", details={"name": data["name"]}
            )

    data["updated_at"] = datetime.now(timezone.utc)
    updated = await uow.breeds.update(breed_id, data)
    if not updated:
        raise NotFound("Breed not found")
    if updated.name != existing.name:
        # Linked dogs carry the breed name as well
        await uow.dogs.rename_breed(breed_id, updated.name)
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="Breed",
        entity_id=breed_id,
        before=existing,
        after=updated,
        metadata={"changed_fields": sorted(k for k in data if k != "updated_at")},
    )
    await uow.commit()
    return updated
