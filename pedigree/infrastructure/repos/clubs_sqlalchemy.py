from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.clubs import ClubRepository
from pedigree.domain.models.club import Club
from pedigree.infrastructure.db.orm.club import ClubORM


class ClubsSQLAlchemyRepository(ClubRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ClubORM) -> Club:
        return Club(
            id=orm.id,
            name=orm.name,
            description=orm.description,
            established_date=orm.established_date,
            location=orm.location,
            contact_email=orm.contact_email,
            website_url=orm.website_url,
            created_at=orm.created_at,
        )

    async def add(self, club: Club) -> Club:
        orm = ClubORM(
            id=club.id,
            name=club.name,
            description=club.description,
            established_date=club.established_date,
            location=club.location,
            contact_email=club.contact_email,
            website_url=club.website_url,
            created_at=club.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Club name already exists") from exc
        return self._to_domain(orm)

    async def get(self, club_id: UUID) -> Club | None:
        result = await self.session.execute(select(ClubORM).where(ClubORM.id == club_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
