from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.dogs import DogRepository, ParentLinks
from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.approval_status import ApprovalStatus
from pedigree.infrastructure.db.orm.dog import DogORM


class DogsSQLAlchemyRepository(DogRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: DogORM) -> Dog:
        return Dog(
            id=orm.id,
            name=orm.name,
            breed=orm.breed,
            gender=orm.gender,
            date_of_birth=orm.date_of_birth,
            date_of_death=orm.date_of_death,
            registration_number=orm.registration_number,
            microchip_number=orm.microchip_number,
            color=orm.color,
            titles=list(orm.titles or []),
            is_neutered=orm.is_neutered,
            biography=orm.biography,
            sire_id=orm.sire_id,
            dam_id=orm.dam_id,
            litter_id=orm.litter_id,
            breed_id=orm.breed_id,
            approval_status=orm.approval_status,
            approved_by=orm.approved_by,
            approval_date=orm.approval_date,
            approval_notes=orm.approval_notes,
            created_by=orm.created_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, dog: Dog) -> Dog:
        orm = DogORM(
            id=dog.id,
            name=dog.name,
            breed=dog.breed,
            gender=dog.gender,
            date_of_birth=dog.date_of_birth,
            date_of_death=dog.date_of_death,
            registration_number=dog.registration_number,
            microchip_number=dog.microchip_number,
            color=dog.color,
            titles=dog.titles,
            is_neutered=dog.is_neutered,
            biography=dog.biography,
            sire_id=dog.sire_id,
            dam_id=dog.dam_id,
            litter_id=dog.litter_id,
            breed_id=dog.breed_id,
            approval_status=dog.approval_status,
            approved_by=dog.approved_by,
            approval_date=dog.approval_date,
            approval_notes=dog.approval_notes,
            created_by=dog.created_by,
            created_at=dog.created_at,
            updated_at=dog.updated_at,
            version=dog.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Dog registration number already exists") from exc
        return self._to_domain(orm)

    async def get(self, dog_id: UUID) -> Dog | None:
        stmt = select(DogORM).where(DogORM.id == dog_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_many(self, dog_ids: Iterable[UUID]) -> list[Dog]:
        ids = list(dog_ids)
        if not ids:
            return []
        stmt = select(DogORM).where(DogORM.id.in_(ids))
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    def _apply_filters(self, stmt, *, breed, approval_status, search):
        if breed is not None:
            stmt = stmt.where(func.lower(DogORM.breed) == breed.lower())
        if approval_status is not None:
            stmt = stmt.where(DogORM.approval_status == approval_status)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(DogORM.name).like(pattern),
                    func.lower(DogORM.registration_number).like(pattern),
                    func.lower(DogORM.microchip_number).like(pattern),
                )
            )
        return stmt

    async def list(
        self,
        *,
        limit: int,
        offset: int = 0,
        breed: str | None = None,
        approval_status: ApprovalStatus | None = None,
        search: str | None = None,
    ) -> list[Dog]:
        stmt = self._apply_filters(
            select(DogORM), breed=breed, approval_status=approval_status, search=search
        )
        stmt = stmt.order_by(DogORM.name, DogORM.id).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count(
        self,
        *,
        breed: str | None = None,
        approval_status: ApprovalStatus | None = None,
        search: str | None = None,
    ) -> int:
        stmt = self._apply_filters(
            select(func.count(DogORM.id)),
            breed=breed,
            approval_status=approval_status,
            search=search,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update(self, dog_id: UUID, data: dict, expected_version: int) -> Dog | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(DogORM)
            .where(DogORM.id == dog_id)
            .where(DogORM.version == expected_version)
            .values(**values)
            .returning(DogORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update dog due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def delete(self, dog_id: UUID) -> bool:
        stmt = delete(DogORM).where(DogORM.id == dog_id).returning(DogORM.id)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError(
                "Dog is referenced by a litter or breeding pair and cannot be deleted"
            ) from exc
        return result.scalar_one_or_none() is not None

    async def get_parent_links(self, dog_ids: Iterable[UUID]) -> ParentLinks:
        ids = list(dog_ids)
        if not ids:
            return {}
        stmt = select(DogORM.id, DogORM.sire_id, DogORM.dam_id).where(DogORM.id.in_(ids))
        result = await self.session.execute(stmt)
        return {row.id: (row.sire_id, row.dam_id) for row in result.all()}

    async def list_by_litter(self, litter_id: UUID) -> list[Dog]:
        stmt = select(DogORM).where(DogORM.litter_id == litter_id).order_by(DogORM.name)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_by_litter(self, litter_id: UUID) -> int:
        stmt = select(func.count(DogORM.id)).where(DogORM.litter_id == litter_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_offspring(self, dog_id: UUID) -> int:
        stmt = select(func.count(DogORM.id)).where(
            or_(DogORM.sire_id == dog_id, DogORM.dam_id == dog_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_breed(self, breed_id: UUID) -> int:
        stmt = select(func.count(DogORM.id)).where(DogORM.breed_id == breed_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def rename_breed(self, breed_id: UUID, name: str) -> int:
        stmt = (
            update(DogORM)
            .where(DogORM.breed_id == breed_id)
            .values(breed=name, version=DogORM.version + 1)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
