from __future__ import annotations

from enum import Enum


class BreedingPairStatus(str, Enum):
    PLANNED = "PLANNED"
    APPROVED = "APPROVED"
    PENDING_TESTING = "PENDING_TESTING"
    BREEDING_SCHEDULED = "BREEDING_SCHEDULED"
    BRED = "BRED"
    UNSUCCESSFUL = "UNSUCCESSFUL"
    CANCELLED = "CANCELLED"

    def is_active(self) -> bool:
        return self not in {BreedingPairStatus.UNSUCCESSFUL, BreedingPairStatus.CANCELLED}

    def can_transition_to(self, target: BreedingPairStatus) -> bool:
        if target is self:
            return True
        return target in _PAIR_TRANSITIONS[self]


_PAIR_TRANSITIONS: dict[BreedingPairStatus, frozenset[BreedingPairStatus]] = {
    BreedingPairStatus.PLANNED: frozenset(
        {
            BreedingPairStatus.APPROVED,
            BreedingPairStatus.PENDING_TESTING,
            BreedingPairStatus.CANCELLED,
        }
    ),
    BreedingPairStatus.PENDING_TESTING: frozenset(
        {BreedingPairStatus.APPROVED, BreedingPairStatus.CANCELLED}
    ),
    BreedingPairStatus.APPROVED: frozenset(
        {BreedingPairStatus.BREEDING_SCHEDULED, BreedingPairStatus.CANCELLED}
    ),
    BreedingPairStatus.BREEDING_SCHEDULED: frozenset(
        {BreedingPairStatus.BRED, BreedingPairStatus.CANCELLED}
    ),
    BreedingPairStatus.BRED: frozenset(
        {BreedingPairStatus.UNSUCCESSFUL, BreedingPairStatus.CANCELLED}
    ),
    BreedingPairStatus.UNSUCCESSFUL: frozenset(),
    BreedingPairStatus.CANCELLED: frozenset(),
}
