from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class TraitPrediction:
    trait_id: UUID
    possible_genotypes: dict[str, float]
    id: UUID = field(default_factory=uuid4)


@dataclass(slots=True)
class GeneticAnalysis:
    """Stored result of a compatibility analysis computed outside this service."""

    id: UUID
    sire_id: UUID
    dam_id: UUID
    overall_compatibility: float
    breeding_pair_id: UUID | None = None
    recommendations: str | None = None
    predictions: list[TraitPrediction] = field(default_factory=list)
    analysis_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        sire_id: UUID,
        dam_id: UUID,
        overall_compatibility: float,
        breeding_pair_id: UUID | None = None,
        recommendations: str | None = None,
        predictions: list[TraitPrediction] | None = None,
    ) -> GeneticAnalysis:
        return cls(
            id=uuid4(),
            sire_id=sire_id,
            dam_id=dam_id,
            overall_compatibility=overall_compatibility,
            breeding_pair_id=breeding_pair_id,
            recommendations=recommendations,
            predictions=list(predictions or []),
        )
