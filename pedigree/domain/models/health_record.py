from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from pedigree.domain.value_objects.health_record_type import HealthRecordType


@dataclass(slots=True)
class HealthRecord:
    id: UUID
    dog_id: UUID
    record_date: date
    type: HealthRecordType
    description: str
    results: str | None = None
    veterinarian_name: str | None = None
    clinic_name: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        dog_id: UUID,
        record_date: date,
        type: HealthRecordType,
        description: str,
        results: str | None = None,
        veterinarian_name: str | None = None,
        clinic_name: str | None = None,
        notes: str | None = None,
    ) -> HealthRecord:
        return cls(
            id=uuid4(),
            dog_id=dog_id,
            record_date=record_date,
            type=type,
            description=description,
            results=results,
            veterinarian_name=veterinarian_name,
            clinic_name=clinic_name,
            notes=notes,
        )
