from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Owner:
    id: UUID
    name: str
    contact_email: str | None = None
    contact_phone: str | None = None
    address: str | None = None
    is_breeder: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        contact_email: str | None = None,
        contact_phone: str | None = None,
        address: str | None = None,
        is_breeder: bool = False,
    ) -> Owner:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            contact_email=contact_email.lower() if contact_email else None,
            contact_phone=contact_phone,
            address=address,
            is_breeder=is_breeder,
            created_at=now,
            updated_at=now,
        )
