from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.breeding_records import (
    BreedingRecordRepository,
)
from pedigree.domain.models.breeding_record import BreedingRecord
from pedigree.domain.value_objects.breeding_record_status import BreedingRecordStatus
from pedigree.domain.value_objects.parent_role import ParentRole
from pedigree.infrastructure.db.orm.breeding_pair import BreedingPairORM
from pedigree.infrastructure.db.orm.breeding_record import (
    BreedingRecordORM,
    BreedingRecordPuppyORM,
)


class BreedingRecordsSQLAlchemyRepository(BreedingRecordRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingRecordORM, puppy_ids: list[UUID]) -> BreedingRecord:
        return BreedingRecord(
            id=orm.id,
            breeding_pair_id=orm.breeding_pair_id,
            breeding_date=orm.breeding_date,
            litter_size=orm.litter_size,
            status=orm.status,
            comments=orm.comments,
            puppy_ids=puppy_ids,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def _puppies(self, record_ids: list[UUID]) -> dict[UUID, list[UUID]]:
        grouped: dict[UUID, list[UUID]] = {rid: [] for rid in record_ids}
        if not record_ids:
            return grouped
        stmt = (
            select(BreedingRecordPuppyORM.breeding_record_id, BreedingRecordPuppyORM.puppy_id)
            .where(BreedingRecordPuppyORM.breeding_record_id.in_(record_ids))
            .order_by(BreedingRecordPuppyORM.id)
        )
        result = await self.session.execute(stmt)
        for record_id, puppy_id in result.all():
            grouped[record_id].append(puppy_id)
        return grouped

    async def add(self, record: BreedingRecord) -> BreedingRecord:
        orm = BreedingRecordORM(
            id=record.id,
            breeding_pair_id=record.breeding_pair_id,
            breeding_date=record.breeding_date,
            litter_size=record.litter_size,
            status=record.status,
            comments=record.comments,
            created_at=record.created_at,
            updated_at=record.updated_at,
            version=record.version,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm, [])

    async def get(self, record_id: UUID) -> BreedingRecord | None:
        result = await self.session.execute(
            select(BreedingRecordORM).where(BreedingRecordORM.id == record_id)
        )
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        puppies = await self._puppies([orm.id])
        return self._to_domain(orm, puppies[orm.id])

    async def update(
        self, record_id: UUID, data: dict, expected_version: int
    ) -> BreedingRecord | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(BreedingRecordORM)
            .where(BreedingRecordORM.id == record_id)
            .where(BreedingRecordORM.version == expected_version)
            .values(**values)
            .returning(BreedingRecordORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        puppies = await self._puppies([orm.id])
        return self._to_domain(orm, puppies[orm.id])

    async def add_puppy(self, record_id: UUID, puppy_id: UUID) -> None:
        self.session.add(BreedingRecordPuppyORM(breeding_record_id=record_id, puppy_id=puppy_id))
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Puppy is already attached to this breeding record",
                details={"puppy_id": str(puppy_id)},
            ) from exc

    async def count_puppies(self, record_id: UUID) -> int:
        stmt = select(func.count(BreedingRecordPuppyORM.id)).where(
            BreedingRecordPuppyORM.breeding_record_id == record_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list_for_dog(
        self,
        dog_id: UUID,
        *,
        role: ParentRole = ParentRole.BOTH,
        limit: int = 20,
        offset: int = 0,
    ) -> list[BreedingRecord]:
        stmt = select(BreedingRecordORM).join(
            BreedingPairORM, BreedingPairORM.id == BreedingRecordORM.breeding_pair_id
        )
        if role is ParentRole.SIRE:
            stmt = stmt.where(BreedingPairORM.sire_id == dog_id)
        elif role is ParentRole.DAM:
            stmt = stmt.where(BreedingPairORM.dam_id == dog_id)
        else:
            stmt = stmt.where(
                or_(BreedingPairORM.sire_id == dog_id, BreedingPairORM.dam_id == dog_id)
            )
        stmt = (
            stmt.order_by(BreedingRecordORM.breeding_date.desc(), BreedingRecordORM.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        rows = result.scalars().all()
        puppies = await self._puppies([row.id for row in rows])
        return [self._to_domain(row, puppies[row.id]) for row in rows]

    async def find_completed_for_puppy(self, puppy_id: UUID) -> BreedingRecord | None:
        stmt = (
            select(BreedingRecordORM)
            .join(
                BreedingRecordPuppyORM,
                BreedingRecordPuppyORM.breeding_record_id == BreedingRecordORM.id,
            )
            .where(BreedingRecordPuppyORM.puppy_id == puppy_id)
            .where(BreedingRecordORM.status == BreedingRecordStatus.COMPLETED)
            .where(BreedingRecordORM.litter_size.is_not(None))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        puppies = await self._puppies([orm.id])
        return self._to_domain(orm, puppies[orm.id])
