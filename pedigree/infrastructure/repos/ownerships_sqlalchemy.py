from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.ownerships import OwnershipRepository
from pedigree.domain.models.ownership import Ownership
from pedigree.infrastructure.db.orm.ownership import OwnershipORM


class OwnershipsSQLAlchemyRepository(OwnershipRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: OwnershipORM) -> Ownership:
        return Ownership(
            id=orm.id,
            owner_id=orm.owner_id,
            dog_id=orm.dog_id,
            start_date=orm.start_date,
            end_date=orm.end_date,
            is_current=orm.is_current,
            transfer_document_url=orm.transfer_document_url,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, ownership: Ownership) -> Ownership:
        orm = OwnershipORM(
            id=ownership.id,
            owner_id=ownership.owner_id,
            dog_id=ownership.dog_id,
            start_date=ownership.start_date,
            end_date=ownership.end_date,
            is_current=ownership.is_current,
            transfer_document_url=ownership.transfer_document_url,
            created_at=ownership.created_at,
            updated_at=ownership.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Dog already has a current owner", details={"dog_id": str(ownership.dog_id)}
            ) from exc
        return self._to_domain(orm)

    async def get_current(self, dog_id: UUID) -> Ownership | None:
        stmt = (
            select(OwnershipORM)
            .where(OwnershipORM.dog_id == dog_id)
            .where(OwnershipORM.is_current.is_(True))
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def close_current(
        self,
        dog_id: UUID,
        *,
        end_date: date,
        expected_owner_id: UUID | None = None,
    ) -> Ownership | None:
        stmt = (
            update(OwnershipORM)
            .where(OwnershipORM.dog_id == dog_id)
            .where(OwnershipORM.is_current.is_(True))
        )
        if expected_owner_id is not None:
            stmt = stmt.where(OwnershipORM.owner_id == expected_owner_id)
        stmt = stmt.values(is_current=False, end_date=end_date).returning(OwnershipORM)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Transfer date precedes the current ownership start") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_for_dog(self, dog_id: UUID) -> list[Ownership]:
        stmt = (
            select(OwnershipORM)
            .where(OwnershipORM.dog_id == dog_id)
            .order_by(OwnershipORM.start_date.desc(), OwnershipORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_for_owner(
        self,
        owner_id: UUID,
        *,
        include_former: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Ownership]:
        stmt = select(OwnershipORM).where(OwnershipORM.owner_id == owner_id)
        if not include_former:
            stmt = stmt.where(OwnershipORM.is_current.is_(True))
        stmt = (
            stmt.order_by(OwnershipORM.start_date.desc(), OwnershipORM.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
