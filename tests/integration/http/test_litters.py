from __future__ import annotations

import pytest

from pedigree.domain.value_objects.gender import Gender

API = "/api/v1"


@pytest.mark.asyncio
async def test_litter_registration_creates_pending_puppies(client, headers, seed_dog, seed_owner):
    sire = await seed_dog("Storm", Gender.MALE, breed="Kelpie")
    dam = await seed_dog("Willow", Gender.FEMALE, breed="Border Collie")
    buyer = await seed_owner("Puppy Buyer")

    litter = await client.post(
        f"{API}/litters",
        json={
            "litter_name": "A litter",
            "sire_id": str(sire.id),
            "dam_id": str(dam.id),
            "whelping_date": "2023-06-10",
            "male_puppies": 1,
            "female_puppies": 2,
        },
        headers=headers["owner"],
    )
    assert litter.status_code == 201
    litter_id = litter.json()["id"]
    assert litter.json()["total_puppies"] == 3

    puppies = await client.post(
        f"{API}/litters/{litter_id}/puppies",
        json={
            "puppies": [
                {"name": "Ace", "gender": "male", "owner_id": str(buyer.id)},
                {"name": "Bee", "gender": "female"},
            ]
        },
        headers=headers["owner"],
    )
    assert puppies.status_code == 201
    created = puppies.json()
    assert {p["approval_status"] for p in created} == {"PENDING"}
    assert {p["breed"] for p in created} == {"Border Collie"}
    assert {p["date_of_birth"] for p in created} == {"2023-06-10"}
    assert {p["sire_id"] for p in created} == {str(sire.id)}

    too_many = await client.post(
        f"{API}/litters/{litter_id}/puppies",
        json={"puppies": [{"name": "Cee", "gender": "FEMALE"}, {"name": "Dee", "gender": "MALE"}]},
        headers=headers["owner"],
    )
    assert too_many.status_code == 409

    detail = await client.get(f"{API}/litters/{litter_id}", headers=headers["viewer"])
    assert detail.status_code == 200
    assert sorted(p["name"] for p in detail.json()["puppies"]) == ["Ace", "Bee"]

    owned = await client.get(f"{API}/owners/{buyer.id}/dogs", headers=headers["viewer"])
    assert [item["dog"]["name"] for item in owned.json()] == ["Ace"]
    assert owned.json()[0]["ownership"]["start_date"] == "2023-06-10"


@pytest.mark.asyncio
async def test_litter_counts_must_agree(client, headers, seed_dog):
    sire = await seed_dog("Storm", Gender.MALE)
    dam = await seed_dog("Willow", Gender.FEMALE)

    response = await client.post(
        f"{API}/litters",
        json={
            "litter_name": "B litter",
            "sire_id": str(sire.id),
            "dam_id": str(dam.id),
            "whelping_date": "2023-06-10",
            "total_puppies": 4,
            "male_puppies": 1,
            "female_puppies": 2,
        },
        headers=headers["owner"],
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_litter_requires_female_dam(client, headers, seed_dog):
    sire = await seed_dog("Storm", Gender.MALE)
    other_male = await seed_dog("Blaze", Gender.MALE)

    response = await client.post(
        f"{API}/litters",
        json={
            "litter_name": "C litter",
            "sire_id": str(sire.id),
            "dam_id": str(other_male.id),
            "whelping_date": "2023-06-10",
            "total_puppies": 2,
        },
        headers=headers["owner"],
    )
    assert response.status_code == 422
