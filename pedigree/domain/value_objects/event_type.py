from __future__ import annotations

from enum import Enum


class EventType(str, Enum):
    SHOW = "SHOW"
    COMPETITION = "COMPETITION"
    SEMINAR = "SEMINAR"
    TRAINING = "TRAINING"
    MEETING = "MEETING"
    SOCIAL = "SOCIAL"
    OTHER = "OTHER"
