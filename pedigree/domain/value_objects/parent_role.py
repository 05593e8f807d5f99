from __future__ import annotations

from enum import Enum


class ParentRole(str, Enum):
    SIRE = "SIRE"
    DAM = "DAM"
    BOTH = "BOTH"
