from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.user import User
from pedigree.domain.value_objects.role import Role


class UserRepository(Protocol):
    async def add(self, user: User) -> User: ...

    async def get(self, user_id: UUID) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def update(self, user_id: UUID, data: dict) -> User | None: ...

    async def list(
        self,
        *,
        limit: int,
        offset: int = 0,
        role: Role | None = None,
        search: str | None = None,
        include_inactive: bool = True,
    ) -> list[User]: ...
