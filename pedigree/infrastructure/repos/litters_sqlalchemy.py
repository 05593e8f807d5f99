from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.litters import LitterRepository
from pedigree.domain.models.litter import Litter
from pedigree.infrastructure.db.orm.litter import LitterORM


class LittersSQLAlchemyRepository(LitterRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: LitterORM) -> Litter:
        return Litter(
            id=orm.id,
            litter_name=orm.litter_name,
            sire_id=orm.sire_id,
            dam_id=orm.dam_id,
            whelping_date=orm.whelping_date,
            total_puppies=orm.total_puppies,
            male_puppies=orm.male_puppies,
            female_puppies=orm.female_puppies,
            registration_number=orm.registration_number,
            breeding_record_id=orm.breeding_record_id,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, litter: Litter) -> Litter:
        orm = LitterORM(
            id=litter.id,
            litter_name=litter.litter_name,
            sire_id=litter.sire_id,
            dam_id=litter.dam_id,
            whelping_date=litter.whelping_date,
            total_puppies=litter.total_puppies,
            male_puppies=litter.male_puppies,
            female_puppies=litter.female_puppies,
            registration_number=litter.registration_number,
            breeding_record_id=litter.breeding_record_id,
            notes=litter.notes,
            created_at=litter.created_at,
            updated_at=litter.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Litter registration number already exists") from exc
        return self._to_domain(orm)

    async def get(self, litter_id: UUID) -> Litter | None:
        result = await self.session.execute(select(LitterORM).where(LitterORM.id == litter_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def count_for_dog(self, dog_id: UUID) -> int:
        stmt = select(func.count(LitterORM.id)).where(
            or_(LitterORM.sire_id == dog_id, LitterORM.dam_id == dog_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
