from __future__ import annotations

from uuid import UUID

from pedigree.application.actor import Actor
from pedigree.application.errors import NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.lineage import MAX_TREE_GENERATIONS, PedigreeNode, build_pedigree
from pedigree.domain.value_objects.approval_status import ApprovalStatus


async def execute(
    uow: UnitOfWork, dog_id: UUID, generations: int = 3, viewer: Actor | None = None
) -> PedigreeNode:
    if not 1 <= generations <= MAX_TREE_GENERATIONS:
        raise ValidationError(
            f"generations must be between 1 and {MAX_TREE_GENERATIONS}",
            details={"generations": generations},
        )
    tree = await build_pedigree(uow, dog_id, generations)
    if viewer is None and tree.dog.approval_status is not ApprovalStatus.APPROVED:
        raise NotFound("Dog not found")
    return tree
