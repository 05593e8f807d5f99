from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from pedigree.domain.value_objects.log_level import LogLevel


@dataclass(frozen=True, slots=True)
class SystemLog:
    level: LogLevel
    message: str
    source: str
    details: dict[str, Any] | None = None
    stack_trace: str | None = None
    ip_address: str | None = None
    user_id: UUID | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: int | None = None
