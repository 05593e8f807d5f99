from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pedigree.domain.value_objects.breeding_pair_status import BreedingPairStatus
from pedigree.domain.value_objects.breeding_record_status import BreedingRecordStatus


class ProgramCreate(BaseModel):
    name: str
    breed: str
    breeder_id: UUID
    start_date: date
    description: str | None = None
    goals: list[str] = Field(default_factory=list)
    end_date: date | None = None
    foundation_dog_ids: list[UUID] = Field(default_factory=list)


class ProgramResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    breed: str
    breeder_id: UUID
    start_date: date
    description: str | None = None
    goals: list[str]
    end_date: date | None = None
    is_active: bool
    foundation_dog_ids: list[UUID]


class PairCreate(BaseModel):
    sire_id: UUID
    dam_id: UUID
    program_id: UUID | None = None
    planned_breeding_date: date | None = None
    compatibility_notes: str | None = None
    genetic_compatibility_score: float | None = None


class PairStatusUpdate(BaseModel):
    status: str
    notes: str | None = None


class PairResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    sire_id: UUID
    dam_id: UUID
    program_id: UUID | None = None
    planned_breeding_date: date | None = None
    compatibility_notes: str | None = None
    genetic_compatibility_score: float | None = None
    status: BreedingPairStatus
    status_notes: str | None = None
    created_at: datetime
    version: int


class RecordCreate(BaseModel):
    breeding_pair_id: UUID
    breeding_date: date
    litter_size: int | None = None
    comments: str | None = None


class RecordStatusUpdate(BaseModel):
    status: str
    litter_size: int | None = None


class AttachPuppyRequest(BaseModel):
    puppy_id: UUID


class RecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    breeding_pair_id: UUID
    breeding_date: date
    litter_size: int | None = None
    status: BreedingRecordStatus
    comments: str | None = None
    puppy_ids: list[UUID]
    version: int
