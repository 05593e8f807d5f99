from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Ownership:
    """Time-bounded assignment of a dog to an owner.

    Rows are closed (``end_date`` set, ``is_current`` cleared) when the dog changes
    hands and are never deleted, so the list of rows for a dog is its ownership history.
    """

    id: UUID
    owner_id: UUID
    dog_id: UUID
    start_date: date
    end_date: date | None = None
    is_current: bool = True
    transfer_document_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        dog_id: UUID,
        start_date: date,
        *,
        is_current: bool = True,
        end_date: date | None = None,
        transfer_document_url: str | None = None,
    ) -> Ownership:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            owner_id=owner_id,
            dog_id=dog_id,
            start_date=start_date,
            end_date=end_date,
            is_current=is_current,
            transfer_document_url=transfer_document_url,
            created_at=now,
            updated_at=now,
        )
