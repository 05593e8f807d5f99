from __future__ import annotations

import pytest

from pedigree.application.errors import ConflictError
from pedigree.domain.models.breeding_pair import BreedingPair
from pedigree.domain.value_objects.gender import Gender

API = "/api/v1"


@pytest.fixture()
async def parents(seed_dog):
    sire = await seed_dog("Storm", Gender.MALE)
    dam = await seed_dog("Willow", Gender.FEMALE)
    return sire, dam


async def create_pair(client, headers, sire, dam, **extra):
    response = await client.post(
        f"{API}/breeding-pairs",
        json={"sire_id": str(sire.id), "dam_id": str(dam.id), **extra},
        headers=headers["owner"],
    )
    assert response.status_code == 201, response.text
    return response.json()


async def set_pair_status(client, headers, pair_id, status, notes=None):
    return await client.patch(
        f"{API}/breeding-pairs/{pair_id}/status",
        json={"status": status, "notes": notes},
        headers=headers["owner"],
    )


@pytest.mark.asyncio
async def test_program_with_pairs(client, headers, parents, seed_owner):
    sire, dam = parents
    breeder = await seed_owner("Hill Kennels")

    program = await client.post(
        f"{API}/breeding-programs",
        json={
            "name": "Working lines",
            "breed": "Border Collie",
            "breeder_id": str(breeder.id),
            "start_date": "2023-01-01",
            "goals": ["herding drive", "sound hips"],
            "foundation_dog_ids": [str(sire.id), str(dam.id)],
        },
        headers=headers["owner"],
    )
    assert program.status_code == 201
    program_id = program.json()["id"]
    assert program.json()["is_active"] is True
    assert program.json()["goals"] == ["herding drive", "sound hips"]

    pair = await create_pair(client, headers, sire, dam, program_id=program_id)
    assert pair["status"] == "PLANNED"
    assert pair["program_id"] == program_id

    pairs = await client.get(
        f"{API}/breeding-programs/{program_id}/pairs", headers=headers["viewer"]
    )
    assert [item["id"] for item in pairs.json()] == [pair["id"]]


@pytest.mark.asyncio
async def test_pair_rejects_swapped_genders(client, headers, parents):
    sire, dam = parents
    response = await client.post(
        f"{API}/breeding-pairs",
        json={"sire_id": str(dam.id), "dam_id": str(sire.id)},
        headers=headers["owner"],
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_duplicate_active_pair_conflicts(client, headers, parents):
    sire, dam = parents
    first = await create_pair(client, headers, sire, dam)

    duplicate = await client.post(
        f"{API}/breeding-pairs",
        json={"sire_id": str(sire.id), "dam_id": str(dam.id)},
        headers=headers["owner"],
    )
    assert duplicate.status_code == 409

    cancelled = await set_pair_status(client, headers, first["id"], "CANCELLED", "Failed hip test")
    assert cancelled.status_code == 200

    # A cancelled pair no longer blocks a new plan for the same dogs
    await create_pair(client, headers, sire, dam)


@pytest.mark.asyncio
async def test_pair_lifecycle(client, headers, parents):
    sire, dam = parents
    pair = await create_pair(client, headers, sire, dam)

    skipped = await set_pair_status(client, headers, pair["id"], "BRED")
    assert skipped.status_code == 409

    for status in ("APPROVED", "BREEDING_SCHEDULED", "BRED"):
        response = await set_pair_status(client, headers, pair["id"], status)
        assert response.status_code == 200
        assert response.json()["status"] == status
    assert response.json()["version"] == 4

    no_reason = await set_pair_status(client, headers, pair["id"], "CANCELLED")
    assert no_reason.status_code == 422


@pytest.mark.asyncio
async def test_viewer_cannot_change_pair_status(client, headers, parents):
    sire, dam = parents
    pair = await create_pair(client, headers, sire, dam)
    response = await client.patch(
        f"{API}/breeding-pairs/{pair['id']}/status",
        json={"status": "APPROVED"},
        headers=headers["viewer"],
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_record_closes_after_full_litter(client, headers, parents, seed_dog):
    sire, dam = parents
    pair = await create_pair(client, headers, sire, dam)

    record = await client.post(
        f"{API}/breeding-records",
        json={"breeding_pair_id": pair["id"], "breeding_date": "2023-04-01", "litter_size": 5},
        headers=headers["owner"],
    )
    assert record.status_code == 201
    record_id = record.json()["id"]
    assert record.json()["status"] == "PLANNED"

    in_progress = await client.patch(
        f"{API}/breeding-records/{record_id}/status",
        json={"status": "IN_PROGRESS"},
        headers=headers["owner"],
    )
    assert in_progress.status_code == 200

    early = await client.patch(
        f"{API}/breeding-records/{record_id}/status",
        json={"status": "COMPLETED"},
        headers=headers["owner"],
    )
    assert early.status_code == 409

    for index in range(5):
        puppy = await seed_dog(f"Pup {index}", Gender.FEMALE, approved=False)
        attached = await client.post(
            f"{API}/breeding-records/{record_id}/puppies",
            json={"puppy_id": str(puppy.id)},
            headers=headers["owner"],
        )
        assert attached.status_code == 200
    assert len(attached.json()["puppy_ids"]) == 5

    completed = await client.patch(
        f"{API}/breeding-records/{record_id}/status",
        json={"status": "COMPLETED"},
        headers=headers["owner"],
    )
    assert completed.status_code == 200
    assert completed.json()["status"] == "COMPLETED"

    extra = await seed_dog("Pup extra", Gender.MALE, approved=False)
    overflow = await client.post(
        f"{API}/breeding-records/{record_id}/puppies",
        json={"puppy_id": str(extra.id)},
        headers=headers["owner"],
    )
    assert overflow.status_code == 409

    # Attaching filled in the puppies' parents from the pair
    puppy_id = completed.json()["puppy_ids"][0]
    puppy = await client.get(f"{API}/dogs/{puppy_id}", headers=headers["viewer"])
    assert puppy.json()["sire_id"] == str(sire.id)
    assert puppy.json()["dam_id"] == str(dam.id)

    by_sire = await client.get(
        f"{API}/dogs/{sire.id}/breeding-records",
        params={"role": "SIRE"},
        headers=headers["viewer"],
    )
    assert [item["id"] for item in by_sire.json()] == [record_id]
    by_dam_as_sire = await client.get(
        f"{API}/dogs/{dam.id}/breeding-records",
        params={"role": "SIRE"},
        headers=headers["viewer"],
    )
    assert by_dam_as_sire.json() == []


@pytest.mark.asyncio
async def test_record_needs_active_pair(client, headers, parents):
    sire, dam = parents
    pair = await create_pair(client, headers, sire, dam)
    await set_pair_status(client, headers, pair["id"], "CANCELLED", "Changed plans")

    response = await client.post(
        f"{API}/breeding-records",
        json={"breeding_pair_id": pair["id"], "breeding_date": "2023-04-01"},
        headers=headers["owner"],
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_puppy_of_completed_record_cannot_be_deleted(client, headers, parents, seed_dog):
    sire, dam = parents
    pair = await create_pair(client, headers, sire, dam)
    record = await client.post(
        f"{API}/breeding-records",
        json={"breeding_pair_id": pair["id"], "breeding_date": "2023-04-01", "litter_size": 1},
        headers=headers["owner"],
    )
    record_id = record.json()["id"]
    await client.patch(
        f"{API}/breeding-records/{record_id}/status",
        json={"status": "IN_PROGRESS"},
        headers=headers["owner"],
    )
    puppy = await seed_dog("Only Pup", Gender.MALE, approved=False)
    await client.post(
        f"{API}/breeding-records/{record_id}/puppies",
        json={"puppy_id": str(puppy.id)},
        headers=headers["owner"],
    )
    completed = await client.patch(
        f"{API}/breeding-records/{record_id}/status",
        json={"status": "COMPLETED"},
        headers=headers["owner"],
    )
    assert completed.status_code == 200

    deleted = await client.delete(f"{API}/dogs/{puppy.id}", headers=headers["admin"])
    assert deleted.status_code == 409
    assert deleted.json()["details"] == {"breeding_record_id": record_id}

    still_there = await client.get(f"{API}/breeding-records/{record_id}", headers=headers["viewer"])
    assert still_there.json()["puppy_ids"] == [str(puppy.id)]
    assert still_there.json()["status"] == "COMPLETED"


@pytest.mark.asyncio
async def test_puppy_of_open_record_can_be_deleted(client, headers, parents, seed_dog):
    sire, dam = parents
    pair = await create_pair(client, headers, sire, dam)
    record = await client.post(
        f"{API}/breeding-records",
        json={"breeding_pair_id": pair["id"], "breeding_date": "2023-04-01", "litter_size": 3},
        headers=headers["owner"],
    )
    record_id = record.json()["id"]
    await client.patch(
        f"{API}/breeding-records/{record_id}/status",
        json={"status": "IN_PROGRESS"},
        headers=headers["owner"],
    )
    puppy = await seed_dog("Early Pup", Gender.MALE, approved=False)
    await client.post(
        f"{API}/breeding-records/{record_id}/puppies",
        json={"puppy_id": str(puppy.id)},
        headers=headers["owner"],
    )

    deleted = await client.delete(f"{API}/dogs/{puppy.id}", headers=headers["admin"])
    assert deleted.status_code == 204
    record = await client.get(f"{API}/breeding-records/{record_id}", headers=headers["viewer"])
    assert record.json()["puppy_ids"] == []


@pytest.mark.asyncio
async def test_database_rejects_second_active_pair_without_program(parents, uow_factory):
    sire, dam = parents
    async with uow_factory() as uow:
        await uow.breeding_pairs.add(BreedingPair.create(sire_id=sire.id, dam_id=dam.id))
        await uow.commit()

    # Bypass the use case lookup so only the index stands in the way
    async with uow_factory() as uow:
        with pytest.raises(ConflictError):
            await uow.breeding_pairs.add(BreedingPair.create(sire_id=sire.id, dam_id=dam.id))


@pytest.mark.asyncio
async def test_breeding_programs_listing(client, headers, parents, seed_owner):
    sire, dam = parents
    breeder = await seed_owner("Hill Kennels")
    for name, breed in (("Working lines", "Border Collie"), ("Show lines", "Beagle")):
        created = await client.post(
            f"{API}/breeding-programs",
            json={
                "name": name,
                "breed": breed,
                "breeder_id": str(breeder.id),
                "start_date": "2023-01-01",
            },
            headers=headers["owner"],
        )
        assert created.status_code == 201

    everything = await client.get(f"{API}/breeding-programs", headers=headers["viewer"])
    assert [item["name"] for item in everything.json()] == ["Show lines", "Working lines"]

    beagles = await client.get(
        f"{API}/breeding-programs", params={"breed": "beagle"}, headers=headers["viewer"]
    )
    assert [item["name"] for item in beagles.json()] == ["Show lines"]

    searched = await client.get(
        f"{API}/breeding-programs", params={"search": "work"}, headers=headers["viewer"]
    )
    assert [item["name"] for item in searched.json()] == ["Working lines"]
