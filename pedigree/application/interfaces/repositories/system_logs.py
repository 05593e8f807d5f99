from __future__ import annotations

from typing import Protocol

from pedigree.domain.models.system_log import SystemLog
from pedigree.domain.value_objects.log_level import LogLevel


class SystemLogRepository(Protocol):
    async def add(self, entry: SystemLog) -> SystemLog: ...

    async def list(
        self, *, limit: int, offset: int = 0, level: LogLevel | None = None
    ) -> list[SystemLog]: ...
