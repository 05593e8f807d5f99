from __future__ import annotations

from uuid import UUID

from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.user import User


async def execute(uow: UnitOfWork, user_id: UUID) -> User:
    user = await uow.users.get(user_id)
    if not user or not user.is_active:
        raise NotFound("User not found")
    return user
