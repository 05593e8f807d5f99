from __future__ import annotations

from enum import Enum


class HealthRecordType(str, Enum):
    VACCINATION = "VACCINATION"
    EXAMINATION = "EXAMINATION"
    TREATMENT = "TREATMENT"
    SURGERY = "SURGERY"
    TEST = "TEST"
    OTHER = "OTHER"
