from __future__ import annotations

from dataclasses import replace
from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest

from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, NotFound, ValidationError
from pedigree.application.lineage import ensure_not_descendant
from pedigree.application.use_cases.dogs import get_dog, review_dog, update_dog
from pedigree.domain.models.dog import Dog
from pedigree.domain.value_objects.approval_status import ApprovalStatus
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.gender import Gender
from pedigree.domain.value_objects.role import Role


class StubDogs:
    def __init__(self, *dogs: Dog, offspring: int = 0) -> None:
        self.dogs = {dog.id: dog for dog in dogs}
        self.offspring = offspring
        self.update_calls: list[dict] = []

    async def get(self, dog_id):
        return self.dogs.get(dog_id)

    async def get_parent_links(self, dog_ids):
        return {
            dog_id: (self.dogs[dog_id].sire_id, self.dogs[dog_id].dam_id)
            for dog_id in dog_ids
            if dog_id in self.dogs
        }

    async def count_offspring(self, dog_id):
        return self.offspring

    async def update(self, dog_id, data, expected_version):
        self.update_calls.append(data)
        current = self.dogs[dog_id]
        if current.version != expected_version:
            return None
        updated = replace(current, **data, version=expected_version + 1)
        self.dogs[dog_id] = updated
        return updated


class StubParentRefs:
    def __init__(self, count: int = 0) -> None:
        self.count = count

    async def count_for_dog(self, dog_id):
        return self.count


class StubAuditLogs:
    def __init__(self) -> None:
        self.entries = []

    async def add(self, entry):
        self.entries.append(entry)
        return entry


def make_uow(dogs: StubDogs, *, pairs: int = 0, litters: int = 0):
    state = SimpleNamespace(committed=False)

    async def commit():
        state.committed = True

    async def rollback():
        return None

    return SimpleNamespace(
        dogs=dogs,
        breeding_pairs=StubParentRefs(pairs),
        litters=StubParentRefs(litters),
        audit_logs=StubAuditLogs(),
        commit=commit,
        rollback=rollback,
        state=state,
    )


def make_dog(name: str, gender: Gender = Gender.MALE, **kwargs) -> Dog:
    return Dog.create(
        name=name, breed="Beagle", gender=gender, date_of_birth=date(2019, 5, 1), **kwargs
    )


def actor(role: Role) -> Actor:
    return Actor(user_id=uuid4(), role=role)


@pytest.mark.asyncio
async def test_update_denies_viewer():
    dog = make_dog("Rex")
    uow = make_uow(StubDogs(dog))
    with pytest.raises(Forbidden):
        await update_dog.execute(
            uow, actor(Role.VIEWER), dog.id, update_dog.UpdateDogInput(version=1, name="Max"),
            max_generations=10,
        )


@pytest.mark.asyncio
async def test_update_records_changed_fields_in_audit():
    dog = make_dog("Rex")
    uow = make_uow(StubDogs(dog))
    result = await update_dog.execute(
        uow, actor(Role.OWNER), dog.id, update_dog.UpdateDogInput(version=1, color="tan"),
        max_generations=10,
    )
    assert result.color == "tan"
    assert result.version == 2
    assert uow.state.committed
    (entry,) = uow.audit_logs.entries
    assert entry.action is AuditAction.UPDATE
    assert entry.metadata == {"changed_fields": ["color"]}


@pytest.mark.asyncio
async def test_update_with_stale_version_conflicts():
    dog = make_dog("Rex")
    uow = make_uow(StubDogs(dog))
    with pytest.raises(ConflictError):
        await update_dog.execute(
            uow, actor(Role.OWNER), dog.id, update_dog.UpdateDogInput(version=7, color="tan"),
            max_generations=10,
        )
    assert not uow.state.committed
    assert uow.audit_logs.entries == []


@pytest.mark.asyncio
async def test_gender_change_blocked_when_dog_has_offspring():
    dog = make_dog("Rex")
    uow = make_uow(StubDogs(dog, offspring=3))
    with pytest.raises(ConflictError):
        await update_dog.execute(
            uow, actor(Role.ADMIN), dog.id, update_dog.UpdateDogInput(version=1, gender="female"),
            max_generations=10,
        )


@pytest.mark.asyncio
@pytest.mark.parametrize("pairs, litters", [(1, 0), (0, 2)])
async def test_gender_change_blocked_when_dog_is_paired_or_whelped(pairs, litters):
    dog = make_dog("Rex")
    uow = make_uow(StubDogs(dog), pairs=pairs, litters=litters)
    with pytest.raises(ConflictError):
        await update_dog.execute(
            uow, actor(Role.ADMIN), dog.id, update_dog.UpdateDogInput(version=1, gender="female"),
            max_generations=10,
        )
    assert uow.dogs.update_calls == []


@pytest.mark.asyncio
async def test_gender_change_allowed_for_unused_dog():
    dog = make_dog("Rex")
    uow = make_uow(StubDogs(dog))
    result = await update_dog.execute(
        uow, actor(Role.ADMIN), dog.id, update_dog.UpdateDogInput(version=1, gender="female"),
        max_generations=10,
    )
    assert result.gender is Gender.FEMALE


@pytest.mark.asyncio
async def test_death_before_birth_rejected():
    dog = make_dog("Rex")
    uow = make_uow(StubDogs(dog))
    with pytest.raises(ValidationError):
        await update_dog.execute(
            uow,
            actor(Role.OWNER),
            dog.id,
            update_dog.UpdateDogInput(version=1, date_of_death=date(2001, 1, 1)),
            max_generations=10,
        )


@pytest.mark.asyncio
async def test_parent_link_to_own_descendant_is_a_cycle():
    grandsire = make_dog("Grandsire")
    sire = make_dog("Sire", sire_id=grandsire.id)
    pup = make_dog("Pup", sire_id=sire.id)
    uow = make_uow(StubDogs(grandsire, sire, pup))
    # Making the pup the grandsire's sire closes a loop
    with pytest.raises(ConflictError):
        await ensure_not_descendant(uow, grandsire.id, [pup.id], max_generations=10)


@pytest.mark.asyncio
async def test_ancestry_deeper_than_limit_is_rejected():
    chain = [make_dog("Root")]
    for index in range(5):
        chain.append(make_dog(f"Gen{index}", sire_id=chain[-1].id))
    newcomer = make_dog("Newcomer")
    uow = make_uow(StubDogs(*chain, newcomer))
    with pytest.raises(ConflictError):
        await ensure_not_descendant(uow, newcomer.id, [chain[-1].id], max_generations=2)
    await ensure_not_descendant(uow, newcomer.id, [chain[-1].id], max_generations=10)


@pytest.mark.asyncio
async def test_ancestry_ending_in_founders_at_the_limit_is_accepted():
    founder_sire = make_dog("Founder")
    founder_dam = make_dog("Foundress", Gender.FEMALE)
    sire = make_dog("Sire", sire_id=founder_sire.id, dam_id=founder_dam.id)
    newcomer = make_dog("Newcomer")
    uow = make_uow(StubDogs(founder_sire, founder_dam, sire, newcomer))
    # After one generation only founders remain, so nothing is left unverified
    await ensure_not_descendant(uow, newcomer.id, [sire.id], max_generations=1)

    grand = make_dog("Grand")
    founder_with_parent = replace(founder_sire, sire_id=grand.id)
    uow = make_uow(StubDogs(grand, founder_with_parent, founder_dam, sire, newcomer))
    with pytest.raises(ConflictError):
        await ensure_not_descendant(uow, newcomer.id, [sire.id], max_generations=1)


@pytest.mark.asyncio
async def test_cycle_found_just_past_the_limit_is_reported():
    root = make_dog("Root")
    child = make_dog("Child", sire_id=root.id)
    grandchild = make_dog("Grandchild", sire_id=child.id)
    uow = make_uow(StubDogs(root, child, grandchild))
    with pytest.raises(ConflictError, match="cycle"):
        await ensure_not_descendant(uow, root.id, [grandchild.id], max_generations=1)


@pytest.mark.asyncio
async def test_anonymous_cannot_see_pending_dog():
    dog = make_dog("Shy")
    uow = make_uow(StubDogs(dog))
    with pytest.raises(NotFound):
        await get_dog.execute(uow, dog.id)
    assert (await get_dog.execute(uow, dog.id, actor(Role.VIEWER))).id == dog.id


@pytest.mark.asyncio
async def test_review_only_from_pending():
    dog = make_dog("Rex")
    uow = make_uow(StubDogs(dog))
    reviewer = actor(Role.ADMIN)
    approved = await review_dog.approve(uow, reviewer, dog.id, "papers checked")
    assert approved.approval_status is ApprovalStatus.APPROVED
    assert approved.approved_by == reviewer.user_id
    assert uow.audit_logs.entries[0].action is AuditAction.APPROVE
    with pytest.raises(ConflictError):
        await review_dog.decline(uow, reviewer, dog.id)


@pytest.mark.asyncio
async def test_review_requires_admin():
    dog = make_dog("Rex")
    uow = make_uow(StubDogs(dog))
    with pytest.raises(Forbidden):
        await review_dog.approve(uow, actor(Role.CLUB), dog.id)
