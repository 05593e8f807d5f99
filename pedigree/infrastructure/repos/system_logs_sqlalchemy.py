from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.interfaces.repositories.system_logs import SystemLogRepository
from pedigree.domain.models.system_log import SystemLog
from pedigree.domain.value_objects.log_level import LogLevel
from pedigree.infrastructure.db.orm.system_log import SystemLogORM


class SystemLogsSQLAlchemyRepository(SystemLogRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: SystemLogORM) -> SystemLog:
        return SystemLog(
            id=orm.id,
            timestamp=orm.timestamp,
            level=orm.level,
            message=orm.message,
            source=orm.source,
            details=orm.details,
            stack_trace=orm.stack_trace,
            ip_address=orm.ip_address,
            user_id=orm.user_id,
        )

    async def add(self, entry: SystemLog) -> SystemLog:
        orm = SystemLogORM(
            timestamp=entry.timestamp,
            level=entry.level,
            message=entry.message,
            source=entry.source,
            details=entry.details,
            stack_trace=entry.stack_trace,
            ip_address=entry.ip_address,
            user_id=entry.user_id,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(
        self, *, limit: int, offset: int = 0, level: LogLevel | None = None
    ) -> list[SystemLog]:
        stmt = select(SystemLogORM)
        if level is not None:
            stmt = stmt.where(SystemLogORM.level == level)
        stmt = stmt.order_by(SystemLogORM.id.desc()).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
