from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.interfaces.repositories.audit_logs import AuditLogRepository
from pedigree.domain.models.audit_log import AuditLog
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.infrastructure.db.orm.audit_log import AuditLogORM


class AuditLogsSQLAlchemyRepository(AuditLogRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AuditLogORM) -> AuditLog:
        return AuditLog(
            id=orm.id,
            timestamp=orm.timestamp,
            action=orm.action,
            entity_type=orm.entity_type,
            entity_id=orm.entity_id,
            user_id=orm.user_id,
            previous_state=orm.previous_state,
            new_state=orm.new_state,
            ip_address=orm.ip_address,
            metadata=orm.extra,
        )

    async def add(self, entry: AuditLog) -> AuditLog:
        orm = AuditLogORM(
            timestamp=entry.timestamp,
            action=entry.action,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            user_id=entry.user_id,
            previous_state=entry.previous_state,
            new_state=entry.new_state,
            ip_address=entry.ip_address,
            extra=entry.metadata,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, entry_id: int) -> AuditLog | None:
        result = await self.session.execute(select(AuditLogORM).where(AuditLogORM.id == entry_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        limit: int,
        offset: int = 0,
        entity_type: str | None = None,
        entity_id: str | None = None,
        user_id: UUID | None = None,
        action: AuditAction | None = None,
    ) -> list[AuditLog]:
        stmt = select(AuditLogORM)
        if entity_type is not None:
            stmt = stmt.where(AuditLogORM.entity_type == entity_type)
        if entity_id is not None:
            stmt = stmt.where(AuditLogORM.entity_id == entity_id)
        if user_id is not None:
            stmt = stmt.where(AuditLogORM.user_id == user_id)
        if action is not None:
            stmt = stmt.where(AuditLogORM.action == action)
        stmt = stmt.order_by(AuditLogORM.id.desc()).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
