from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from pedigree.domain.value_objects.health_record_type import HealthRecordType


class HealthRecordCreate(BaseModel):
    record_date: date
    type: str
    description: str
    results: str | None = None
    veterinarian_name: str | None = None
    clinic_name: str | None = None
    notes: str | None = None


class HealthRecordUpdate(BaseModel):
    record_date: date | None = None
    type: str | None = None
    description: str | None = None
    results: str | None = None
    veterinarian_name: str | None = None
    clinic_name: str | None = None
    notes: str | None = None


class HealthRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    dog_id: UUID
    record_date: date
    type: HealthRecordType
    description: str
    results: str | None = None
    veterinarian_name: str | None = None
    clinic_name: str | None = None
    notes: str | None = None


class CompetitionResultCreate(BaseModel):
    competition_name: str
    competition_date: date
    location: str | None = None
    rank: int | None = None
    score: float | None = None
    title_earned: str | None = None
    judge: str | None = None
    notes: str | None = None


class CompetitionResultUpdate(BaseModel):
    competition_name: str | None = None
    competition_date: date | None = None
    location: str | None = None
    rank: int | None = None
    score: float | None = None
    title_earned: str | None = None
    judge: str | None = None
    notes: str | None = None


class CompetitionResultResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    dog_id: UUID
    competition_name: str
    competition_date: date
    location: str | None = None
    rank: int | None = None
    score: float | None = None
    title_earned: str | None = None
    judge: str | None = None
    notes: str | None = None
