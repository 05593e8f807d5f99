from __future__ import annotations

from dataclasses import dataclass

from pedigree.application.actor import Actor
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import ensure_page, parse_enum
from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.approval_status import ApprovalStatus


@dataclass(slots=True)
class ListDogsResult:
    items: list[Dog]
    total: int
    limit: int
    offset: int


async def execute(
    uow: UnitOfWork,
    viewer: Actor | None = None,
    *,
    limit: int = 20,
    offset: int = 0,
    breed: str | None = None,
    approval_status: str | ApprovalStatus | None = None,
    search: str | None = None,
) -> ListDogsResult:
    ensure_page(limit, offset)
    status = (
        parse_enum(ApprovalStatus, approval_status, "approval_status")
        if approval_status is not None
        else None
    )
    if viewer is None:
        if status not in (None, ApprovalStatus.APPROVED):
            return ListDogsResult(items=[], total=0, limit=limit, offset=offset)
        status = ApprovalStatus.APPROVED

    items = await uow.dogs.list(
        limit=limit, offset=offset, breed=breed, approval_status=status, search=search
    )
    total = await uow.dogs.count(breed=breed, approval_status=status, search=search)
    return ListDogsResult(items=items, total=total, limit=limit, offset=offset)
