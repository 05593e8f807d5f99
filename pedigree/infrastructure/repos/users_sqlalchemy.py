from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.users import UserRepository
from pedigree.domain.models.user import User
from pedigree.domain.value_objects.role import Role
from pedigree.infrastructure.db.orm.user import UserORM


class UsersSQLAlchemyRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: UserORM) -> User:
        return User(
            id=orm.id,
            email=orm.email,
            hashed_password=orm.hashed_password,
            first_name=orm.first_name,
            last_name=orm.last_name,
            role=orm.role,
            is_active=orm.is_active,
            last_login=orm.last_login,
            owner_id=orm.owner_id,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, user: User) -> User:
        orm = UserORM(
            id=user.id,
            email=user.email,
            hashed_password=user.hashed_password,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            is_active=user.is_active,
            last_login=user.last_login,
            owner_id=user.owner_id,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Email already registered") from exc
        return self._to_domain(orm)

    async def get(self, user_id: UUID) -> User | None:
        stmt = select(UserORM).where(UserORM.id == user_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserORM).where(UserORM.email == email.lower())
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, user_id: UUID, data: dict) -> User | None:
        stmt = update(UserORM).where(UserORM.id == user_id).values(**data).returning(UserORM)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        limit: int,
        offset: int = 0,
        role: Role | None = None,
        search: str | None = None,
        include_inactive: bool = True,
    ) -> list[User]:
        stmt = select(UserORM)
        if role is not None:
            stmt = stmt.where(UserORM.role == role)
        if not include_inactive:
            stmt = stmt.where(UserORM.is_active.is_(True))
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(UserORM.email).like(pattern),
                    func.lower(UserORM.first_name).like(pattern),
                    func.lower(UserORM.last_name).like(pattern),
                )
            )
        stmt = stmt.order_by(UserORM.email).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
