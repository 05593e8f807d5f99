from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.use_cases.genetics.create_trait import GENOTYPE_SEPARATOR
from pedigree.application.validators import ensure_fraction, parse_enum
from pedigree.domain.models.dog_genotype import DogGenotype
from pedigree.domain.models.genetic_trait import GeneticTrait
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.inheritance_pattern import GenotypeTestMethod


@dataclass(slots=True)
class RecordGenotypeInput:
    dog_id: UUID
    trait_id: UUID
    genotype: str
    test_method: str | GenotypeTestMethod | None = None
    test_date: date | None = None
    confidence: float | None = None


def normalize_genotype(trait: GeneticTrait, genotype: str) -> str:
    """Validate ``"A/a"`` style notation against the trait's alleles."""
    symbols = [part.strip() for part in genotype.split(GENOTYPE_SEPARATOR)]
    known = trait.allele_symbols()
    unknown = [s for s in symbols if s not in known]
    if not genotype.strip() or unknown:
        raise ValidationError(
            f"Genotype must be allele symbols of {trait.name} joined by '{GENOTYPE_SEPARATOR}'",
            details={"genotype": genotype, "allowed": sorted(known)},
        )
    return GENOTYPE_SEPARATOR.join(symbols)


async def execute(uow: UnitOfWork, actor: Actor, payload: RecordGenotypeInput) -> DogGenotype:
    if not actor.role.can_create():
        raise Forbidden("Role not allowed to record genotypes")
    ensure_fraction(payload.confidence, "confidence")
    method = (
        parse_enum(GenotypeTestMethod, payload.test_method, "test_method")
        if payload.test_method is not None
        else None
    )
    if not await uow.dogs.get(payload.dog_id):
        raise NotFound("Dog not found")
    trait = await uow.genetics.get_trait(payload.trait_id)
    if not trait:
        raise NotFound("Genetic trait not found")

    genotype = await uow.genetics.add_genotype(
        DogGenotype.create(
            dog_id=payload.dog_id,
            trait_id=trait.id,
            genotype=normalize_genotype(trait, payload.genotype),
            test_method=method,
            test_date=payload.test_date,
            confidence=payload.confidence,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="DogGenotype",
        entity_id=genotype.id,
        after=genotype,
    )
    await uow.commit()
    return genotype
