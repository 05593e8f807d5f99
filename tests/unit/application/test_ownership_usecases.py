from __future__ import annotations

from dataclasses import replace
from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest

from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, ValidationError
from pedigree.application.use_cases.owners import transfer_ownership
from pedigree.domain.models.ownership import Ownership
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role


class StubOwnerships:
    def __init__(self, current: Ownership | None) -> None:
        self.current = current
        self.added: list[Ownership] = []
        self.lose_race = False

    async def get_current(self, dog_id):
        return self.current

    async def close_current(self, dog_id, *, end_date, expected_owner_id=None):
        if self.lose_race or self.current is None:
            return None
        if expected_owner_id is not None and self.current.owner_id != expected_owner_id:
            return None
        closed = replace(self.current, is_current=False, end_date=end_date)
        self.current = None
        return closed

    async def add(self, ownership):
        self.added.append(ownership)
        self.current = ownership
        return ownership


class Found:
    async def get(self, _id):
        return SimpleNamespace(id=_id)


def make_uow(ownerships: StubOwnerships):
    state = SimpleNamespace(committed=False, audit=[])

    async def commit():
        state.committed = True

    async def add_audit(entry):
        state.audit.append(entry)
        return entry

    return SimpleNamespace(
        dogs=Found(),
        owners=Found(),
        ownerships=ownerships,
        audit_logs=SimpleNamespace(add=add_audit),
        commit=commit,
        state=state,
    )


def current_ownership(dog_id, owner_id) -> Ownership:
    return Ownership.create(owner_id=owner_id, dog_id=dog_id, start_date=date(2021, 3, 1))


ADMIN = Actor(user_id=uuid4(), role=Role.ADMIN)


@pytest.mark.asyncio
async def test_transfer_closes_current_and_opens_new():
    dog_id, old_owner, new_owner = uuid4(), uuid4(), uuid4()
    repo = StubOwnerships(current_ownership(dog_id, old_owner))
    uow = make_uow(repo)
    result = await transfer_ownership.execute(
        uow,
        ADMIN,
        transfer_ownership.TransferOwnershipInput(
            dog_id=dog_id, new_owner_id=new_owner, transfer_date=date(2024, 6, 1)
        ),
    )
    assert result.previous.owner_id == old_owner
    assert result.previous.end_date == date(2024, 6, 1)
    assert not result.previous.is_current
    assert result.current.owner_id == new_owner
    assert result.current.start_date == date(2024, 6, 1)
    assert uow.state.committed
    (entry,) = uow.state.audit
    assert entry.action is AuditAction.TRANSFER_OWNERSHIP
    assert entry.metadata["new_owner_id"] == str(new_owner)


@pytest.mark.asyncio
async def test_transfer_that_loses_the_race_conflicts():
    dog_id = uuid4()
    repo = StubOwnerships(current_ownership(dog_id, uuid4()))
    repo.lose_race = True
    uow = make_uow(repo)
    with pytest.raises(ConflictError):
        await transfer_ownership.execute(
            uow,
            ADMIN,
            transfer_ownership.TransferOwnershipInput(dog_id=dog_id, new_owner_id=uuid4()),
        )
    assert repo.added == []
    assert not uow.state.committed


@pytest.mark.asyncio
async def test_transfer_from_wrong_owner_conflicts():
    dog_id = uuid4()
    repo = StubOwnerships(current_ownership(dog_id, uuid4()))
    with pytest.raises(ConflictError):
        await transfer_ownership.execute(
            make_uow(repo),
            ADMIN,
            transfer_ownership.TransferOwnershipInput(
                dog_id=dog_id, new_owner_id=uuid4(), from_owner_id=uuid4()
            ),
        )


@pytest.mark.asyncio
async def test_transfer_to_same_owner_rejected():
    dog_id, owner_id = uuid4(), uuid4()
    repo = StubOwnerships(current_ownership(dog_id, owner_id))
    with pytest.raises(ValidationError):
        await transfer_ownership.execute(
            make_uow(repo),
            ADMIN,
            transfer_ownership.TransferOwnershipInput(dog_id=dog_id, new_owner_id=owner_id),
        )


@pytest.mark.asyncio
async def test_transfer_before_current_start_rejected():
    dog_id = uuid4()
    repo = StubOwnerships(current_ownership(dog_id, uuid4()))
    with pytest.raises(ValidationError):
        await transfer_ownership.execute(
            make_uow(repo),
            ADMIN,
            transfer_ownership.TransferOwnershipInput(
                dog_id=dog_id, new_owner_id=uuid4(), transfer_date=date(2020, 1, 1)
            ),
        )


@pytest.mark.asyncio
async def test_transfer_without_current_owner_rejected():
    with pytest.raises(ValidationError):
        await transfer_ownership.execute(
            make_uow(StubOwnerships(None)),
            ADMIN,
            transfer_ownership.TransferOwnershipInput(dog_id=uuid4(), new_owner_id=uuid4()),
        )


@pytest.mark.asyncio
async def test_viewer_cannot_transfer():
    viewer = Actor(user_id=uuid4(), role=Role.VIEWER)
    with pytest.raises(Forbidden):
        await transfer_ownership.execute(
            make_uow(StubOwnerships(None)),
            viewer,
            transfer_ownership.TransferOwnershipInput(dog_id=uuid4(), new_owner_id=uuid4()),
        )
