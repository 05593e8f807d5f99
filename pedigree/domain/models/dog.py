from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from pedigree.domain.value_objects.approval_status import ApprovalStatus
from pedigree.domain.value_objects.gender import Gender


@dataclass(slots=True)
class Dog:
    id: UUID
    name: str
    breed: str
    gender: Gender
    date_of_birth: date
    date_of_death: date | None = None
    registration_number: str | None = None
    microchip_number: str | None = None
    color: str | None = None
    titles: list[str] = field(default_factory=list)
    is_neutered: bool = False
    biography: str | None = None

    # Pedigree links
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    litter_id: UUID | None = None
    breed_id: UUID | None = None

    # Approval workflow
    approval_status: ApprovalStatus = ApprovalStatus.PENDING
    approved_by: UUID | None = None
    approval_date: datetime | None = None
    approval_notes: str | None = None

    created_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        name: str,
        breed: str,
        gender: Gender,
        date_of_birth: date,
        date_of_death: date | None = None,
        registration_number: str | None = None,
        microchip_number: str | None = None,
        color: str | None = None,
        titles: list[str] | None = None,
        is_neutered: bool = False,
        biography: str | None = None,
        sire_id: UUID | None = None,
        dam_id: UUID | None = None,
        litter_id: UUID | None = None,
        breed_id: UUID | None = None,
        created_by: UUID | None = None,
    ) -> Dog:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            breed=breed,
            gender=gender,
            date_of_birth=date_of_birth,
            date_of_death=date_of_death,
            registration_number=registration_number,
            microchip_number=microchip_number,
            color=color,
            titles=list(titles or []),
            is_neutered=is_neutered,
            biography=biography,
            sire_id=sire_id,
            dam_id=dam_id,
            litter_id=litter_id,
            breed_id=breed_id,
            approval_status=ApprovalStatus.PENDING,
            created_by=created_by,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
