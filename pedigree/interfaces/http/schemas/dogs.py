from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pedigree.domain.value_objects.approval_status import ApprovalStatus
from pedigree.domain.value_objects.gender import Gender


class DogCreate(BaseModel):
    name: str
    breed: str | None = None
    gender: str
    date_of_birth: date
    date_of_death: date | None = None
    registration_number: str | None = None
    microchip_number: str | None = None
    color: str | None = None
    titles: list[str] = Field(default_factory=list)
    is_neutered: bool = False
    biography: str | None = None
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    litter_id: UUID | None = None
    breed_id: UUID | None = None

class DogUpdate(BaseModel):
    version: int
    name: str | None = None
    breed: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None
    date_of_death: date | None = None
    registration_number: str | None = None
    microchip_number: str | None = None
    color: str | None = None
    titles: list[str] | None = None
    is_neutered: bool | None = None
    biography: str | None = None
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    litter_id: UUID | None = None
    breed_id: UUID | None = None

class ParentsUpdate(BaseModel):
    sire_id: UUID | None = None
    dam_id: UUID | None = None


class ReviewRequest(BaseModel):
    notes: str | None = None


class DogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    breed: str
    breed_id: UUID | None = None
    gender: Gender
    date_of_birth: date
    date_of_death: date | None = None
    registration_number: str | None = None
    microchip_number: str | None = None
    color: str | None = None
    titles: list[str] = Field(default_factory=list)
    is_neutered: bool
    biography: str | None = None
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    litter_id: UUID | None = None
    approval_status: ApprovalStatus
    approved_by: UUID | None = None
    approval_date: datetime | None = None
    approval_notes: str | None = None
    created_by: UUID | None = None
    created_at: datetime
    updated_at: datetime
    version: int


class DogsListResponse(BaseModel):
    items: list[DogResponse]
    total: int
    limit: int
    offset: int


class PedigreeNodeResponse(BaseModel):
    id: UUID
    name: str
    breed: str
    gender: Gender
    registration_number: str | None = None
    date_of_birth: date
    generation: int
    sire: PedigreeNodeResponse | None = None
    dam: PedigreeNodeResponse | None = None


class CommonAncestorResponse(BaseModel):
    dog_id: UUID
    name: str | None = None
    occurrences: int
    contribution: float


class LinebreedingResponse(BaseModel):
    sire_id: UUID
    dam_id: UUID
    generations: int
    inbreeding_coefficient: float
    genetic_diversity: float
    common_ancestors: list[CommonAncestorResponse]
    recommendations: list[str]
