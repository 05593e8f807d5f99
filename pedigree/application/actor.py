from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pedigree.application.errors import Forbidden
from pedigree.domain.value_objects.role import Role


@dataclass(frozen=True, slots=True)
class Actor:
    """Who is performing a use case, as seen by the application layer."""

    user_id: UUID
    role: Role
    ip_address: str | None = None

    def require(self, role: Role) -> None:
        if self.role != role:
            raise Forbidden(f"{role.value} role required")
