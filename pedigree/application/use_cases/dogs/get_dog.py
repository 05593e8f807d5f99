from __future__ import annotations

from uuid import UUID

from pedigree.application.actor import Actor
from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.approval_status import ApprovalStatus


async def execute(uow: UnitOfWork, dog_id: UUID, viewer: Actor | None = None) -> Dog:
    dog = await uow.dogs.get(dog_id)
    # Anonymous callers only ever see approved records
    if not dog or (viewer is None and dog.approval_status is not ApprovalStatus.APPROVED):
        raise NotFound("Dog not found")
    return dog
