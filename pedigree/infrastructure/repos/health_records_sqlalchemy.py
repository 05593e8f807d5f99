from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.interfaces.repositories.health_records import (
    HealthRecordRepository,
)
from pedigree.domain.models.health_record import HealthRecord
from pedigree.infrastructure.db.orm.health_record import HealthRecordORM


class HealthRecordsSQLAlchemyRepository(HealthRecordRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: HealthRecordORM) -> HealthRecord:
        return HealthRecord(
            id=orm.id,
            dog_id=orm.dog_id,
            record_date=orm.record_date,
            type=orm.type,
            description=orm.description,
            results=orm.results,
            veterinarian_name=orm.veterinarian_name,
            clinic_name=orm.clinic_name,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    async def add(self, record: HealthRecord) -> HealthRecord:
        orm = HealthRecordORM(
            id=record.id,
            dog_id=record.dog_id,
            record_date=record.record_date,
            type=record.type,
            description=record.description,
            results=record.results,
            veterinarian_name=record.veterinarian_name,
            clinic_name=record.clinic_name,
            notes=record.notes,
            created_at=record.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list_for_dog(self, dog_id: UUID) -> list[HealthRecord]:
        stmt = (
            select(HealthRecordORM)
            .where(HealthRecordORM.dog_id == dog_id)
            .order_by(HealthRecordORM.record_date.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def get(self, record_id: UUID) -> HealthRecord | None:
        result = await self.session.execute(
            select(HealthRecordORM).where(HealthRecordORM.id == record_id)
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, record_id: UUID, data: dict) -> HealthRecord | None:
        stmt = (
            update(HealthRecordORM)
            .where(HealthRecordORM.id == record_id)
            .values(**data)
            .returning(HealthRecordORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, record_id: UUID) -> bool:
        stmt = (
            delete(HealthRecordORM)
            .where(HealthRecordORM.id == record_id)
            .returning(HealthRecordORM.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
