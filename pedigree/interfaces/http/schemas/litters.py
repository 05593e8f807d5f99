from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pedigree.interfaces.http.schemas.dogs import DogResponse


class LitterCreate(BaseModel):
    litter_name: str
    sire_id: UUID
    dam_id: UUID
    whelping_date: date
    total_puppies: int | None = None
    male_puppies: int | None = None
    female_puppies: int | None = None
    registration_number: str | None = None
    breeding_record_id: UUID | None = None
    notes: str | None = None


class LitterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    litter_name: str
    sire_id: UUID
    dam_id: UUID
    whelping_date: date
    total_puppies: int
    male_puppies: int | None = None
    female_puppies: int | None = None
    registration_number: str | None = None
    breeding_record_id: UUID | None = None
    notes: str | None = None


class LitterDetailResponse(LitterResponse):
    puppies: list[DogResponse] = Field(default_factory=list)


class PuppyCreate(BaseModel):
    name: str
    gender: str
    color: str | None = None
    microchip_number: str | None = None
    registration_number: str | None = None
    owner_id: UUID | None = None


class PuppiesCreate(BaseModel):
    puppies: list[PuppyCreate] = Field(min_length=1)
