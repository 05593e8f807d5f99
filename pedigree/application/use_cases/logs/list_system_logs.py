from __future__ import annotations

from pedigree.application.actor import Actor
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import ensure_page, parse_enum
from pedigree.domain.models.system_log import SystemLog
from pedigree.domain.value_objects.log_level import LogLevel
from pedigree.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    actor: Actor,
    *,
    limit: int = 50,
    offset: int = 0,
    level: str | LogLevel | None = None,
) -> list[SystemLog]:
    actor.require(Role.ADMIN)
    ensure_page(limit, offset)
    parsed = parse_enum(LogLevel, level, "level") if level is not None else None
    return await uow.system_logs.list(limit=limit, offset=offset, level=parsed)
