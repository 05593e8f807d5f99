from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.breeding_programs import (
    BreedingProgramRepository,
)
from pedigree.domain.models.breeding_program import BreedingProgram
from pedigree.infrastructure.db.orm.breeding_program import (
    BreedingProgramFoundationDogORM,
    BreedingProgramORM,
)


class BreedingProgramsSQLAlchemyRepository(BreedingProgramRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(
        self, orm: BreedingProgramORM, foundation_dog_ids: list[UUID]
    ) -> BreedingProgram:
        return BreedingProgram(
            id=orm.id,
            name=orm.name,
            breed=orm.breed,
            breeder_id=orm.breeder_id,
            start_date=orm.start_date,
            description=orm.description,
            goals=list(orm.goals or []),
            end_date=orm.end_date,
            is_active=orm.is_active,
            foundation_dog_ids=foundation_dog_ids,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def _foundation_dogs(self, program_ids: list[UUID]) -> dict[UUID, list[UUID]]:
        if not program_ids:
            return {}
        stmt = select(
            BreedingProgramFoundationDogORM.program_id, BreedingProgramFoundationDogORM.dog_id
        ).where(BreedingProgramFoundationDogORM.program_id.in_(program_ids))
        result = await self.session.execute(stmt)
        grouped: dict[UUID, list[UUID]] = {pid: [] for pid in program_ids}
        for program_id, dog_id in result.all():
            grouped[program_id].append(dog_id)
        return grouped

    async def add(self, program: BreedingProgram) -> BreedingProgram:
        orm = BreedingProgramORM(
            id=program.id,
            name=program.name,
            breed=program.breed,
            breeder_id=program.breeder_id,
            start_date=program.start_date,
            description=program.description,
            goals=program.goals,
            end_date=program.end_date,
            is_active=program.is_active,
            created_at=program.created_at,
            updated_at=program.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
            self.session.add_all(
                [
                    BreedingProgramFoundationDogORM(program_id=program.id, dog_id=dog_id)
                    for dog_id in dict.fromkeys(program.foundation_dog_ids)
                ]
            )
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Breeding program references unknown records") from exc
        return self._to_domain(orm, list(dict.fromkeys(program.foundation_dog_ids)))

    async def get(self, program_id: UUID) -> BreedingProgram | None:
        stmt = select(BreedingProgramORM).where(BreedingProgramORM.id == program_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        foundation = await self._foundation_dogs([orm.id])
        return self._to_domain(orm, foundation[orm.id])

    async def list(
        self,
        *,
        limit: int,
        offset: int = 0,
        search: str | None = None,
        breeder_id: UUID | None = None,
        breed: str | None = None,
        is_active: bool | None = None,
    ) -> list[BreedingProgram]:
        stmt = select(BreedingProgramORM)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(BreedingProgramORM.name).like(pattern),
                    func.lower(BreedingProgramORM.description).like(pattern),
                )
            )
        if breeder_id is not None:
            stmt = stmt.where(BreedingProgramORM.breeder_id == breeder_id)
        if breed is not None:
            stmt = stmt.where(func.lower(BreedingProgramORM.breed) == breed.lower())
        if is_active is not None:
            stmt = stmt.where(BreedingProgramORM.is_active.is_(is_active))
        stmt = (
            stmt.order_by(BreedingProgramORM.name, BreedingProgramORM.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        rows = result.scalars().all()
        foundation = await self._foundation_dogs([row.id for row in rows])
        return [self._to_domain(row, foundation[row.id]) for row in rows]
