from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pedigree.domain.value_objects.inheritance_pattern import (
    GenotypeTestMethod,
    InheritancePattern,
)


class AlleleSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    symbol: str
    name: str
    dominant: bool = False


class TraitCreate(BaseModel):
    name: str
    inheritance_pattern: str
    description: str | None = None
    health_implications: str | None = None
    alleles: list[AlleleSchema] = Field(default_factory=list)


class TraitResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    inheritance_pattern: InheritancePattern
    description: str | None = None
    health_implications: str | None = None
    alleles: list[AlleleSchema]


class GenotypeCreate(BaseModel):
    trait_id: UUID
    genotype: str
    test_method: str | None = None
    test_date: date | None = None
    confidence: float | None = None


class GenotypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    dog_id: UUID
    trait_id: UUID
    genotype: str
    test_method: GenotypeTestMethod | None = None
    test_date: date | None = None
    confidence: float | None = None


class PrevalenceUpsert(BaseModel):
    breed: str
    trait_id: UUID
    frequency: float
    study_reference: str | None = None


class PrevalenceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    breed: str
    trait_id: UUID
    frequency: float
    study_reference: str | None = None


class PredictionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    trait_id: UUID
    possible_genotypes: dict[str, float]


class AnalysisCreate(BaseModel):
    sire_id: UUID
    dam_id: UUID
    overall_compatibility: float
    breeding_pair_id: UUID | None = None
    recommendations: str | None = None
    predictions: list[PredictionSchema] = Field(default_factory=list)


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    sire_id: UUID
    dam_id: UUID
    breeding_pair_id: UUID | None = None
    overall_compatibility: float
    recommendations: str | None = None
    predictions: list[PredictionSchema]
    analysis_date: datetime
