from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.breeding_pairs import BreedingPairRepository
from pedigree.domain.models.breeding_pair import BreedingPair
from pedigree.domain.value_objects.breeding_pair_status import BreedingPairStatus
from pedigree.infrastructure.db.orm.breeding_pair import BreedingPairORM

INACTIVE_STATUSES = (BreedingPairStatus.UNSUCCESSFUL, BreedingPairStatus.CANCELLED)


class BreedingPairsSQLAlchemyRepository(BreedingPairRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingPairORM) -> BreedingPair:
        return BreedingPair(
            id=orm.id,
            sire_id=orm.sire_id,
            dam_id=orm.dam_id,
            program_id=orm.program_id,
            planned_breeding_date=orm.planned_breeding_date,
            compatibility_notes=orm.compatibility_notes,
            genetic_compatibility_score=orm.genetic_compatibility_score,
            status=orm.status,
            status_notes=orm.status_notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, pair: BreedingPair) -> BreedingPair:
        orm = BreedingPairORM(
            id=pair.id,
            sire_id=pair.sire_id,
            dam_id=pair.dam_id,
            program_id=pair.program_id,
            planned_breeding_date=pair.planned_breeding_date,
            compatibility_notes=pair.compatibility_notes,
            genetic_compatibility_score=pair.genetic_compatibility_score,
            status=pair.status,
            status_notes=pair.status_notes,
            created_at=pair.created_at,
            updated_at=pair.updated_at,
            version=pair.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("An active breeding pair already exists for this pairing") from exc
        return self._to_domain(orm)

    async def get(self, pair_id: UUID) -> BreedingPair | None:
        result = await self.session.execute(
            select(BreedingPairORM).where(BreedingPairORM.id == pair_id)
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def find_active(
        self, sire_id: UUID, dam_id: UUID, program_id: UUID | None
    ) -> BreedingPair | None:
        stmt = (
            select(BreedingPairORM)
            .where(BreedingPairORM.sire_id == sire_id)
            .where(BreedingPairORM.dam_id == dam_id)
            .where(BreedingPairORM.status.not_in(INACTIVE_STATUSES))
        )
        if program_id is None:
            stmt = stmt.where(BreedingPairORM.program_id.is_(None))
        else:
            stmt = stmt.where(BreedingPairORM.program_id == program_id)
        result = await self.session.execute(stmt.limit(1))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_for_program(self, program_id: UUID) -> list[BreedingPair]:
        stmt = (
            select(BreedingPairORM)
            .where(BreedingPairORM.program_id == program_id)
            .order_by(BreedingPairORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(
        self, pair_id: UUID, data: dict, expected_version: int
    ) -> BreedingPair | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(BreedingPairORM)
            .where(BreedingPairORM.id == pair_id)
            .where(BreedingPairORM.version == expected_version)
            .values(**values)
            .returning(BreedingPairORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("An active breeding pair already exists for this pairing") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def count_for_dog(self, dog_id: UUID) -> int:
        stmt = select(func.count(BreedingPairORM.id)).where(
            or_(BreedingPairORM.sire_id == dog_id, BreedingPairORM.dam_id == dog_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
