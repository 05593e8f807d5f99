from __future__ import annotations

from dataclasses import dataclass, field

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import parse_enum, require_text
from pedigree.domain.models.genetic_trait import Allele, GeneticTrait
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.inheritance_pattern import InheritancePattern

GENOTYPE_SEPARATOR = "/"


@dataclass(slots=True)
class AlleleInput:
    symbol: str
    name: str
    dominant: bool = False


@dataclass(slots=True)
class CreateTraitInput:
    name: str
    inheritance_pattern: str | InheritancePattern
    description: str | None = None
    health_implications: str | None = None
    alleles: list[AlleleInput] = field(default_factory=list)


async def execute(uow: UnitOfWork, actor: Actor, payload: CreateTraitInput) -> GeneticTrait:
    if not actor.role.can_review():
        raise Forbidden("Only administrators can define genetic traits")
    pattern = parse_enum(InheritancePattern, payload.inheritance_pattern, "inheritance_pattern")
    trait = GeneticTrait.create(
        name=require_text(payload.name, "name"),
        inheritance_pattern=pattern,
        description=payload.description,
        health_implications=payload.health_implications,
    )
    seen: set[str] = set()
    for item in payload.alleles:
        symbol = require_text(item.symbol, "allele.symbol")
        if GENOTYPE_SEPARATOR in symbol or symbol in seen:
            raise ValidationError("Invalid or duplicate allele symbol", details={"symbol": symbol})
        seen.add(symbol)
        trait.alleles.append(
            Allele.create(
                trait_id=trait.id,
                symbol=symbol,
                name=require_text(item.name, "allele.name"),
                dominant=item.dominant,
            )
        )

    created = await uow.genetics.add_trait(trait)
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="GeneticTrait",
        entity_id=created.id,
        after=created,
    )
    await uow.commit()
    return created
