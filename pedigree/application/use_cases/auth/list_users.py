from __future__ import annotations

from pedigree.application.actor import Actor
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import parse_enum
from pedigree.domain.models.user import User
from pedigree.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    *,
    limit: int,
    offset: int = 0,
    role: str | Role | None = None,
    search: str | None = None,
    include_inactive: bool = True,
) -> list[User]:
    actor.require(Role.ADMIN)
    return await uow.users.list(
        limit=limit,
        offset=offset,
        role=parse_enum(Role, role, "role") if role else None,
        search=search,
        include_inactive=include_inactive,
    )
