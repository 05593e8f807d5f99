from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.lineage import load_parent
from pedigree.application.use_cases.genetics.record_genotype import normalize_genotype
from pedigree.application.validators import ensure_fraction
from pedigree.domain.models.genetic_analysis import GeneticAnalysis, TraitPrediction
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.gender import Gender

PROBABILITY_TOLERANCE = 1e-6


@dataclass(slots=True)
class PredictionInput:
    trait_id: UUID
    possible_genotypes: dict[str, float]


@dataclass(slots=True)
class RecordAnalysisInput:
    sire_id: UUID
    dam_id: UUID
    overall_compatibility: float
    breeding_pair_id: UUID | None = None
    recommendations: str | None = None
    predictions: list[PredictionInput] = field(default_factory=list)


async def execute(uow: UnitOfWork, actor: Actor, payload: RecordAnalysisInput) -> GeneticAnalysis:
    """Store a compatibility analysis computed elsewhere; nothing is derived here."""
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to record genetic analyses")
    if payload.overall_compatibility is None:
        raise ValidationError("overall_compatibility is required")
    ensure_fraction(payload.overall_compatibility, "overall_compatibility")
    await load_parent(uow, payload.sire_id, Gender.MALE)
    await load_parent(uow, payload.dam_id, Gender.FEMALE)
    if payload.breeding_pair_id is not None:
        pair = await uow.breeding_pairs.get(payload.breeding_pair_id)
        if not pair:
            raise NotFound("Breeding pair not found")
        if (pair.sire_id, pair.dam_id) != (payload.sire_id, payload.dam_id):
            raise ValidationError("Analysis parents do not match the breeding pair")

    predictions: list[TraitPrediction] = []
    seen_traits: set[UUID] = set()
    for item in payload.predictions:
        if item.trait_id in seen_traits:
            raise ValidationError(
                "Duplicate prediction for trait", details={"trait_id": str(item.trait_id)}
            )
        seen_traits.add(item.trait_id)
        trait = await uow.genetics.get_trait(item.trait_id)
        if not trait:
            raise NotFound("Genetic trait not found", details={"trait_id": str(item.trait_id)})
        genotypes: dict[str, float] = {}
        for genotype, probability in item.possible_genotypes.items():
            ensure_fraction(probability, "probability")
            genotypes[normalize_genotype(trait, genotype)] = probability
        if sum(genotypes.values()) > 1.0 + PROBABILITY_TOLERANCE:
            raise ValidationError(
                "Genotype probabilities for a trait cannot sum to more than 1",
                details={"trait_id": str(item.trait_id)},
            )
        predictions.append(TraitPrediction(trait_id=trait.id, possible_genotypes=genotypes))

    analysis = await uow.genetics.add_analysis(
        GeneticAnalysis.create(
            sire_id=payload.sire_id,
            dam_id=payload.dam_id,
            overall_compatibility=payload.overall_compatibility,
            breeding_pair_id=payload.breeding_pair_id,
            recommendations=payload.recommendations,
            predictions=predictions,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="GeneticAnalysis",
        entity_id=analysis.id,
        after=analysis,
    )
    await uow.commit()
    return analysis
