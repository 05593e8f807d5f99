from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.breeds import BreedRepository
from pedigree.domain.models.breed import Breed
from pedigree.infrastructure.db.orm.breed import BreedORM


class BreedsSQLAlchemyRepository(BreedRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedORM) -> Breed:
        return Breed(
            id=orm.id,
            name=orm.name,
            group=orm.group,
            origin=orm.origin,
            description=orm.description,
            temperament=orm.temperament,
            average_lifespan=orm.average_lifespan,
            average_height=orm.average_height,
            average_weight=orm.average_weight,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, breed: Breed) -> Breed:
        orm = BreedORM(
            id=breed.id,
            name=breed.name,
            group=breed.group,
            origin=breed.origin,
            description=breed.description,
            temperament=breed.temperament,
            average_lifespan=breed.average_lifespan,
            average_height=breed.average_height,
            average_weight=breed.average_weight,
            created_at=breed.created_at,
            updated_at=breed.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Breed name already exists", details={"name": breed.name}) from exc
        return self._to_domain(orm)

    async def get(self, breed_id: UUID) -> Breed | None:
        result = await self.session.execute(select(BreedORM).where(BreedORM.id == breed_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def find_by_name(self, name: str) -> Breed | None:
        stmt = select(BreedORM).where(func.lower(BreedORM.name) == name.strip().lower())
        result = await self.session.execute(stmt.limit(1))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self, *, limit: int, offset: int = 0, search: str | None = None
    ) -> list[Breed]:
        stmt = select(BreedORM)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(BreedORM.name).like(pattern),
                    func.lower(BreedORM.group).like(pattern),
                    func.lower(BreedORM.origin).like(pattern),
                )
            )
        stmt = stmt.order_by(BreedORM.name, BreedORM.id).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, breed_id: UUID, data: dict) -> Breed | None:
        stmt = update(BreedORM).where(BreedORM.id == breed_id).values(**data).returning(BreedORM)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Breed name already exists") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, breed_id: UUID) -> bool:
        stmt = delete(BreedORM).where(BreedORM.id == breed_id).returning(BreedORM.id)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Breed is referenced by dogs and cannot be deleted") from exc
        return result.scalar_one_or_none() is not None
