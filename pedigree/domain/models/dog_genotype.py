from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from pedigree.domain.value_objects.inheritance_pattern import GenotypeTestMethod


@dataclass(slots=True)
class DogGenotype:
    id: UUID
    dog_id: UUID
    trait_id: UUID
    genotype: str
    test_method: GenotypeTestMethod | None = None
    test_date: date | None = None
    confidence: float | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        dog_id: UUID,
        trait_id: UUID,
        genotype: str,
        test_method: GenotypeTestMethod | None = None,
        test_date: date | None = None,
        confidence: float | None = None,
    ) -> DogGenotype:
        return cls(
            id=uuid4(),
            dog_id=dog_id,
            trait_id=trait_id,
            genotype=genotype,
            test_method=test_method,
            test_date=test_date,
            confidence=confidence,
        )


@dataclass(slots=True)
class BreedTraitPrevalence:
    id: UUID
    breed: str
    trait_id: UUID
    frequency: float
    study_reference: str | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        breed: str,
        trait_id: UUID,
        frequency: float,
        study_reference: str | None = None,
    ) -> BreedTraitPrevalence:
        return cls(
            id=uuid4(),
            breed=breed,
            trait_id=trait_id,
            frequency=frequency,
            study_reference=study_reference,
        )
