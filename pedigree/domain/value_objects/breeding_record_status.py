from __future__ import annotations

from enum import Enum


class BreedingRecordStatus(str, Enum):
    PLANNED = "PLANNED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    ABORTED = "ABORTED"

    def can_transition_to(self, target: BreedingRecordStatus) -> bool:
        if target is self:
            return True
        return target in _RECORD_TRANSITIONS[self]


_RECORD_TRANSITIONS: dict[BreedingRecordStatus, frozenset[BreedingRecordStatus]] = {
    BreedingRecordStatus.PLANNED: frozenset(
        {BreedingRecordStatus.IN_PROGRESS, BreedingRecordStatus.ABORTED}
    ),
    BreedingRecordStatus.IN_PROGRESS: frozenset(
        {
            BreedingRecordStatus.COMPLETED,
            BreedingRecordStatus.FAILED,
            BreedingRecordStatus.ABORTED,
        }
    ),
    BreedingRecordStatus.COMPLETED: frozenset(),
    BreedingRecordStatus.FAILED: frozenset(),
    BreedingRecordStatus.ABORTED: frozenset(),
}
