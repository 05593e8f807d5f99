from __future__ import annotations

from dataclasses import replace
from types import SimpleNamespace
from uuid import uuid4

import pytest

from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, ValidationError
from pedigree.application.use_cases.breeding import update_pair_status
from pedigree.application.use_cases.litters.create_litter import resolve_total
from pedigree.domain.models.breeding_pair import BreedingPair
from pedigree.domain.value_objects.breeding_pair_status import BreedingPairStatus
from pedigree.domain.value_objects.role import Role


class StubPairs:
    def __init__(self, pair: BreedingPair) -> None:
        self.pair = pair

    async def get(self, pair_id):
        return self.pair if pair_id == self.pair.id else None

    async def update(self, pair_id, data, expected_version):
        if expected_version != self.pair.version:
            return None
        self.pair = replace(self.pair, **data, version=expected_version + 1)
        return self.pair


def make_uow(pairs: StubPairs):
    async def commit():
        return None

    async def add_audit(entry):
        return entry

    return SimpleNamespace(
        breeding_pairs=pairs, audit_logs=SimpleNamespace(add=add_audit), commit=commit
    )


HANDLER = Actor(user_id=uuid4(), role=Role.HANDLER)


@pytest.mark.asyncio
async def test_pair_follows_lifecycle():
    pair = BreedingPair.create(sire_id=uuid4(), dam_id=uuid4())
    uow = make_uow(StubPairs(pair))
    for status in ("APPROVED", "BREEDING_SCHEDULED", "BRED"):
        pair = await update_pair_status.execute(uow, HANDLER, pair.id, status)
    assert pair.status is BreedingPairStatus.BRED
    assert pair.version == 4


@pytest.mark.asyncio
async def test_pair_cannot_skip_states():
    pair = BreedingPair.create(sire_id=uuid4(), dam_id=uuid4())
    with pytest.raises(ConflictError):
        await update_pair_status.execute(make_uow(StubPairs(pair)), HANDLER, pair.id, "BRED")


@pytest.mark.asyncio
async def test_terminal_pair_is_frozen():
    pair = BreedingPair.create(sire_id=uuid4(), dam_id=uuid4())
    uow = make_uow(StubPairs(pair))
    pair = await update_pair_status.execute(uow, HANDLER, pair.id, "CANCELLED", "owner withdrew")
    with pytest.raises(ConflictError):
        await update_pair_status.execute(uow, HANDLER, pair.id, "PLANNED")


@pytest.mark.asyncio
async def test_cancel_requires_reason():
    pair = BreedingPair.create(sire_id=uuid4(), dam_id=uuid4())
    with pytest.raises(ValidationError):
        await update_pair_status.execute(make_uow(StubPairs(pair)), HANDLER, pair.id, "CANCELLED")


def test_resolve_total_from_counts():
    assert resolve_total(None, 3, 2) == 5
    assert resolve_total(4, None, None) == 4
    with pytest.raises(ValidationError):
        resolve_total(6, 3, 2)
    with pytest.raises(ValidationError):
        resolve_total(-1, None, None)
