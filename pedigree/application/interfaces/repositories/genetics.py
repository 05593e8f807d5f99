from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pedigree.domain.models.dog_genotype import BreedTraitPrevalence, DogGenotype
from pedigree.domain.models.genetic_analysis import GeneticAnalysis
from pedigree.domain.models.genetic_trait import GeneticTrait


class GeneticsRepository(Protocol):
    async def add_trait(self, trait: GeneticTrait) -> GeneticTrait: ...

    async def get_trait(self, trait_id: UUID) -> GeneticTrait | None: ...

    async def list_traits(self) -> list[GeneticTrait]: ...

    async def add_genotype(self, genotype: DogGenotype) -> DogGenotype: ...

    async def get_genotype(self, dog_id: UUID, trait_id: UUID) -> DogGenotype | None: ...

    async def list_genotypes(self, dog_id: UUID) -> list[DogGenotype]: ...

    async def get_prevalence(self, breed: str, trait_id: UUID) -> BreedTraitPrevalence | None: ...

    async def save_prevalence(self, prevalence: BreedTraitPrevalence) -> BreedTraitPrevalence: ...

    async def add_analysis(self, analysis: GeneticAnalysis) -> GeneticAnalysis: ...

    async def get_analysis(self, analysis_id: UUID) -> GeneticAnalysis | None: ...
