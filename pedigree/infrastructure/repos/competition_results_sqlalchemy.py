from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.interfaces.repositories.competition_results import (
    CompetitionResultRepository,
)
from pedigree.domain.models.competition_result import CompetitionResult
from pedigree.infrastructure.db.orm.competition_result import CompetitionResultORM


class CompetitionResultsSQLAlchemyRepository(CompetitionResultRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: CompetitionResultORM) -> CompetitionResult:
        return CompetitionResult(
            id=orm.id,
            dog_id=orm.dog_id,
            competition_name=orm.competition_name,
            competition_date=orm.competition_date,
            location=orm.location,
            rank=orm.rank,
            score=orm.score,
            title_earned=orm.title_earned,
            judge=orm.judge,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, result: CompetitionResult) -> CompetitionResult:
        orm = CompetitionResultORM(
            id=result.id,
            dog_id=result.dog_id,
            competition_name=result.competition_name,
            competition_date=result.competition_date,
            location=result.location,
            rank=result.rank,
            score=result.score,
            title_earned=result.title_earned,
            judge=result.judge,
            notes=result.notes,
            created_at=result.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list_for_dog(self, dog_id: UUID) -> list[CompetitionResult]:
        stmt = (
            select(CompetitionResultORM)
            .where(CompetitionResultORM.dog_id == dog_id)
            .order_by(CompetitionResultORM.competition_date.desc())
        )
        rows = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in rows.scalars().all()]

    async def get(self, result_id: UUID) -> CompetitionResult | None:
        rows = await self.session.execute(
            select(CompetitionResultORM).where(CompetitionResultORM.id == result_id)
        )
        orm = rows.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, result_id: UUID, data: dict) -> CompetitionResult | None:
        stmt = (
            update(CompetitionResultORM)
            .where(CompetitionResultORM.id == result_id)
            .values(**data)
            .returning(CompetitionResultORM)
        )
        rows = await self.session.execute(stmt)
        orm = rows.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, result_id: UUID) -> bool:
        stmt = (
            delete(CompetitionResultORM)
            .where(CompetitionResultORM.id == result_id)
            .returning(CompetitionResultORM.id)
        )
        rows = await self.session.execute(stmt)
        return rows.scalar_one_or_none() is not None
