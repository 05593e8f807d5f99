from __future__ import annotations

from uuid import UUID

from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.dog_genotype import DogGenotype
from pedigree.domain.models.genetic_analysis import GeneticAnalysis
from pedigree.domain.models.genetic_trait import GeneticTrait


async def list_traits(uow: UnitOfWork) -> list[GeneticTrait]:
    return await uow.genetics.list_traits()


async def get_trait(uow: UnitOfWork, trait_id: UUID) -> GeneticTrait:
    trait = await uow.genetics.get_trait(trait_id)
    if not trait:
        raise NotFound("Genetic trait not found")
    return trait


async def list_dog_genotypes(uow: UnitOfWork, dog_id: UUID) -> list[DogGenotype]:
    if not await uow.dogs.get(dog_id):
        raise NotFound("Dog not found")
    return await uow.genetics.list_genotypes(dog_id)


async def get_analysis(uow: UnitOfWork, analysis_id: UUID) -> GeneticAnalysis:
    analysis = await uow.genetics.get_analysis(analysis_id)
    if not analysis:
        raise NotFound("Genetic analysis not found")
    return analysis
