from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.genetics import GeneticsRepository
from pedigree.domain.models.dog_genotype import BreedTraitPrevalence, DogGenotype
from pedigree.domain.models.genetic_analysis import GeneticAnalysis, TraitPrediction
from pedigree.domain.models.genetic_trait import Allele, GeneticTrait
from pedigree.infrastructure.db.orm.genetics import (
    AlleleORM,
    BreedTraitPrevalenceORM,
    DogGenotypeORM,
    GeneticAnalysisORM,
    GeneticTraitORM,
    TraitPredictionORM,
)


class GeneticsSQLAlchemyRepository(GeneticsRepository):
    """Traits, genotypes, breed prevalences and stored compatibility analyses."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _trait_to_domain(self, orm: GeneticTraitORM, alleles: list[AlleleORM]) -> GeneticTrait:
        return GeneticTrait(
            id=orm.id,
            name=orm.name,
            inheritance_pattern=orm.inheritance_pattern,
            description=orm.description,
            health_implications=orm.health_implications,
            alleles=[
                Allele(
                    id=allele.id,
                    trait_id=allele.trait_id,
                    symbol=allele.symbol,
                    name=allele.name,
                    dominant=allele.dominant,
                )
                for allele in alleles
            ],
            created_at=orm.created_at,
        )

    def _genotype_to_domain(self, orm: DogGenotypeORM) -> DogGenotype:
        return DogGenotype(
            id=orm.id,
            dog_id=orm.dog_id,
            trait_id=orm.trait_id,
            genotype=orm.genotype,
            test_method=orm.test_method,
            test_date=orm.test_date,
            confidence=orm.confidence,
            created_at=orm.created_at,
        )

    def _prevalence_to_domain(self, orm: BreedTraitPrevalenceORM) -> BreedTraitPrevalence:
        return BreedTraitPrevalence(
            id=orm.id,
            breed=orm.breed,
            trait_id=orm.trait_id,
            frequency=orm.frequency,
            study_reference=orm.study_reference,
            updated_at=orm.updated_at,
        )

    async def _alleles(self, trait_ids: list[UUID]) -> dict[UUID, list[AlleleORM]]:
        grouped: dict[UUID, list[AlleleORM]] = {tid: [] for tid in trait_ids}
        if not trait_ids:
            return grouped
        stmt = (
            select(AlleleORM)
            .where(AlleleORM.trait_id.in_(trait_ids))
            .order_by(AlleleORM.symbol)
        )
        result = await self.session.execute(stmt)
        for allele in result.scalars().all():
            grouped[allele.trait_id].append(allele)
        return grouped

    async def add_trait(self, trait: GeneticTrait) -> GeneticTrait:
        orm = GeneticTraitORM(
            id=trait.id,
            name=trait.name,
            inheritance_pattern=trait.inheritance_pattern,
            description=trait.description,
            health_implications=trait.health_implications,
            created_at=trait.created_at,
        )
        self.session.add(orm)
        allele_rows = [
            AlleleORM(
                id=allele.id,
                trait_id=trait.id,
                symbol=allele.symbol,
                name=allele.name,
                dominant=allele.dominant,
            )
            for allele in trait.alleles
        ]
        self.session.add_all(allele_rows)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Genetic trait name or allele symbol already exists",
                details={"name": trait.name},
            ) from exc
        return self._trait_to_domain(orm, allele_rows)

    async def get_trait(self, trait_id: UUID) -> GeneticTrait | None:
        result = await self.session.execute(
            select(GeneticTraitORM).where(GeneticTraitORM.id == trait_id)
        )
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        alleles = await self._alleles([orm.id])
        return self._trait_to_domain(orm, alleles[orm.id])

    async def list_traits(self) -> list[GeneticTrait]:
        stmt = select(GeneticTraitORM).order_by(GeneticTraitORM.name)
        result = await self.session.execute(stmt)
        rows = result.scalars().all()
        alleles = await self._alleles([row.id for row in rows])
        return [self._trait_to_domain(row, alleles[row.id]) for row in rows]

    async def add_genotype(self, genotype: DogGenotype) -> DogGenotype:
        orm = DogGenotypeORM(
            id=genotype.id,
            dog_id=genotype.dog_id,
            trait_id=genotype.trait_id,
            genotype=genotype.genotype,
            test_method=genotype.test_method,
            test_date=genotype.test_date,
            confidence=genotype.confidence,
            created_at=genotype.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Genotype already recorded for this dog and trait",
                details={"dog_id": str(genotype.dog_id), "trait_id": str(genotype.trait_id)},
            ) from exc
        return self._genotype_to_domain(orm)

    async def get_genotype(self, dog_id: UUID, trait_id: UUID) -> DogGenotype | None:
        stmt = select(DogGenotypeORM).where(
            DogGenotypeORM.dog_id == dog_id, DogGenotypeORM.trait_id == trait_id
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._genotype_to_domain(orm) if orm else None

    async def list_genotypes(self, dog_id: UUID) -> list[DogGenotype]:
        stmt = select(DogGenotypeORM).where(DogGenotypeORM.dog_id == dog_id)
        result = await self.session.execute(stmt)
        return [self._genotype_to_domain(orm) for orm in result.scalars().all()]

    async def _prevalence_row(self, breed: str, trait_id: UUID) -> BreedTraitPrevalenceORM | None:
        stmt = select(BreedTraitPrevalenceORM).where(
            func.lower(BreedTraitPrevalenceORM.breed) == breed.lower(),
            BreedTraitPrevalenceORM.trait_id == trait_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_prevalence(self, breed: str, trait_id: UUID) -> BreedTraitPrevalence | None:
        orm = await self._prevalence_row(breed, trait_id)
        return self._prevalence_to_domain(orm) if orm else None

    async def save_prevalence(self, prevalence: BreedTraitPrevalence) -> BreedTraitPrevalence:
        orm = await self._prevalence_row(prevalence.breed, prevalence.trait_id)
        if orm is None:
            orm = BreedTraitPrevalenceORM(
                id=prevalence.id,
                breed=prevalence.breed,
                trait_id=prevalence.trait_id,
                frequency=prevalence.frequency,
                study_reference=prevalence.study_reference,
                updated_at=prevalence.updated_at,
            )
            self.session.add(orm)
        else:
            orm.frequency = prevalence.frequency
            orm.study_reference = prevalence.study_reference
            orm.updated_at = datetime.now(timezone.utc)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Breed prevalence was modified concurrently") from exc
        return self._prevalence_to_domain(orm)

    async def add_analysis(self, analysis: GeneticAnalysis) -> GeneticAnalysis:
        orm = GeneticAnalysisORM(
            id=analysis.id,
            breeding_pair_id=analysis.breeding_pair_id,
            sire_id=analysis.sire_id,
            dam_id=analysis.dam_id,
            overall_compatibility=analysis.overall_compatibility,
            recommendations=analysis.recommendations,
            analysis_date=analysis.analysis_date,
        )
        self.session.add(orm)
        await self.session.flush()
        self.session.add_all(
            [
                TraitPredictionORM(
                    id=prediction.id,
                    analysis_id=analysis.id,
                    trait_id=prediction.trait_id,
                    possible_genotypes=prediction.possible_genotypes,
                )
                for prediction in analysis.predictions
            ]
        )
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Duplicate trait prediction in analysis") from exc
        return await self.get_analysis(analysis.id)

    async def get_analysis(self, analysis_id: UUID) -> GeneticAnalysis | None:
        result = await self.session.execute(
            select(GeneticAnalysisORM).where(GeneticAnalysisORM.id == analysis_id)
        )
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        rows = await self.session.execute(
            select(TraitPredictionORM).where(TraitPredictionORM.analysis_id == analysis_id)
        )
        return GeneticAnalysis(
            id=orm.id,
            sire_id=orm.sire_id,
            dam_id=orm.dam_id,
            overall_compatibility=orm.overall_compatibility,
            breeding_pair_id=orm.breeding_pair_id,
            recommendations=orm.recommendations,
            predictions=[
                TraitPrediction(
                    id=row.id,
                    trait_id=row.trait_id,
                    possible_genotypes=dict(row.possible_genotypes),
                )
                for row in rows.scalars().all()
            ],
            analysis_date=orm.analysis_date,
        )
