from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from pedigree.domain.value_objects.role import Role


@dataclass(slots=True)
class User:
    id: UUID
    email: str
    hashed_password: str
    first_name: str
    last_name: str
    role: Role = Role.VIEWER
    is_active: bool = True
    last_login: datetime | None = None
    owner_id: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        email: str,
        hashed_password: str,
        first_name: str,
        last_name: str,
        *,
        role: Role = Role.VIEWER,
        is_active: bool = True,
        owner_id: UUID | None = None,
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            email=email.lower(),
            hashed_password=hashed_password,
            first_name=first_name,
            last_name=last_name,
            role=role,
            is_active=is_active,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )
