from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.interfaces.repositories.owners import OwnerRepository
from pedigree.domain.models.owner import Owner
from pedigree.infrastructure.db.orm.owner import OwnerORM


class OwnersSQLAlchemyRepository(OwnerRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: OwnerORM) -> Owner:
        return Owner(
            id=orm.id,
            name=orm.name,
            contact_email=orm.contact_email,
            contact_phone=orm.contact_phone,
            address=orm.address,
            is_breeder=orm.is_breeder,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, owner: Owner) -> Owner:
        orm = OwnerORM(
            id=owner.id,
            name=owner.name,
            contact_email=owner.contact_email,
            contact_phone=owner.contact_phone,
            address=owner.address,
            is_breeder=owner.is_breeder,
            created_at=owner.created_at,
            updated_at=owner.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, owner_id: UUID) -> Owner | None:
        result = await self.session.execute(select(OwnerORM).where(OwnerORM.id == owner_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self, *, limit: int, offset: int = 0, search: str | None = None
    ) -> list[Owner]:
        stmt = select(OwnerORM)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(OwnerORM.name).like(pattern),
                    func.lower(OwnerORM.contact_email).like(pattern),
                )
            )
        stmt = stmt.order_by(OwnerORM.name, OwnerORM.id).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
