from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from pedigree.domain.value_objects.inheritance_pattern import InheritancePattern


@dataclass(slots=True)
class Allele:
    id: UUID
    trait_id: UUID
    symbol: str
    name: str
    dominant: bool = False

    @classmethod
    def create(cls, trait_id: UUID, symbol: str, name: str, dominant: bool = False) -> Allele:
        return cls(id=uuid4(), trait_id=trait_id, symbol=symbol, name=name, dominant=dominant)


@dataclass(slots=True)
class GeneticTrait:
    id: UUID
    name: str
    inheritance_pattern: InheritancePattern
    description: str | None = None
    health_implications: str | None = None
    alleles: list[Allele] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        inheritance_pattern: InheritancePattern,
        description: str | None = None,
        health_implications: str | None = None,
    ) -> GeneticTrait:
        return cls(
            id=uuid4(),
            name=name,
            inheritance_pattern=inheritance_pattern,
            description=description,
            health_implications=health_implications,
        )

    def allele_symbols(self) -> set[str]:
        return {allele.symbol for allele in self.alleles}
