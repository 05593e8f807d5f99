from __future__ import annotations

import asyncio
from datetime import date

import pytest

from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError
from pedigree.application.use_cases.owners import transfer_ownership
from pedigree.domain.value_objects.gender import Gender


@pytest.mark.asyncio
async def test_owner_and_ownership_flow(client, headers, seed_dog):
    dog = await seed_dog("Rex", Gender.MALE)

    owner = await client.post(
        "/api/v1/owners",
        json={"name": "Hill Kennels", "contact_email": "hill@example.com", "is_breeder": True},
        headers=headers["owner"],
    )
    assert owner.status_code == 201
    owner_id = owner.json()["id"]

    ownership = await client.post(
        "/api/v1/ownerships",
        json={"owner_id": owner_id, "dog_id": str(dog.id), "start_date": "2021-06-01"},
        headers=headers["owner"],
    )
    assert ownership.status_code == 201
    assert ownership.json()["is_current"] is True

    duplicate = await client.post(
        "/api/v1/ownerships",
        json={"owner_id": owner_id, "dog_id": str(dog.id), "start_date": "2021-07-01"},
        headers=headers["owner"],
    )
    assert duplicate.status_code == 409

    dogs = await client.get(f"/api/v1/owners/{owner_id}/dogs", headers=headers["viewer"])
    assert dogs.status_code == 200
    assert [item["dog"]["name"] for item in dogs.json()] == ["Rex"]


@pytest.mark.asyncio
async def test_transfer_closes_previous_ownership(client, headers, seed_dog, seed_owner):
    dog = await seed_dog("Rex", Gender.MALE)
    seller = await seed_owner("Seller", dog_id=dog.id)
    buyer = await seed_owner("Buyer")

    response = await client.post(
        f"/api/v1/dogs/{dog.id}/transfer",
        json={"new_owner_id": str(buyer.id), "transfer_date": "2023-03-01"},
        headers=headers["owner"],
    )
    assert response.status_code == 200
    body = response.json()
    assert body["previous"]["owner_id"] == str(seller.id)
    assert body["previous"]["is_current"] is False
    assert body["previous"]["end_date"] == "2023-03-01"
    assert body["current"]["owner_id"] == str(buyer.id)
    assert body["current"]["is_current"] is True

    history = await client.get(f"/api/v1/dogs/{dog.id}/ownerships", headers=headers["viewer"])
    current = [item for item in history.json() if item["is_current"]]
    assert len(history.json()) == 2
    assert [item["owner_id"] for item in current] == [str(buyer.id)]

    former = await client.get(
        f"/api/v1/owners/{seller.id}/dogs",
        params={"include_former": True},
        headers=headers["viewer"],
    )
    assert len(former.json()) == 1
    still_current = await client.get(f"/api/v1/owners/{seller.id}/dogs", headers=headers["viewer"])
    assert still_current.json() == []

    audit = await client.get(
        "/api/v1/audit-logs",
        params={"action": "TRANSFER_OWNERSHIP", "entity_id": str(dog.id)},
        headers=headers["admin"],
    )
    assert len(audit.json()) == 1
    assert audit.json()[0]["metadata"]["new_owner_id"] == str(buyer.id)


@pytest.mark.asyncio
async def test_transfer_from_wrong_owner_conflicts(client, headers, seed_dog, seed_owner):
    dog = await seed_dog("Rex", Gender.MALE)
    await seed_owner("Seller", dog_id=dog.id)
    impostor = await seed_owner("Impostor")
    buyer = await seed_owner("Buyer")

    response = await client.post(
        f"/api/v1/dogs/{dog.id}/transfer",
        json={"new_owner_id": str(buyer.id), "from_owner_id": str(impostor.id)},
        headers=headers["owner"],
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_viewer_cannot_transfer(client, headers, seed_dog, seed_owner):
    dog = await seed_dog("Rex", Gender.MALE)
    await seed_owner("Seller", dog_id=dog.id)
    buyer = await seed_owner("Buyer")

    response = await client.post(
        f"/api/v1/dogs/{dog.id}/transfer",
        json={"new_owner_id": str(buyer.id)},
        headers=headers["viewer"],
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_concurrent_transfers_only_one_wins(users, seed_dog, seed_owner, uow_factory):
    dog = await seed_dog("Rex", Gender.MALE)
    seller = await seed_owner("Seller", dog_id=dog.id)
    first_buyer = await seed_owner("First Buyer")
    second_buyer = await seed_owner("Second Buyer")
    actor = Actor(user_id=users["owner"].id, role=users["owner"].role)

    async def transfer(buyer_id):
        async with uow_factory() as uow:
            return await transfer_ownership.execute(
                uow,
                actor,
                transfer_ownership.TransferOwnershipInput(
                    dog_id=dog.id,
                    new_owner_id=buyer_id,
                    transfer_date=date(2023, 3, 1),
                    from_owner_id=seller.id,
                ),
            )

    outcomes = await asyncio.gather(
        transfer(first_buyer.id), transfer(second_buyer.id), return_exceptions=True
    )
    winners = [item for item in outcomes if isinstance(item, transfer_ownership.TransferResult)]
    losers = [item for item in outcomes if isinstance(item, ConflictError)]
    assert len(winners) == 1
    assert len(losers) == 1

    async with uow_factory() as uow:
        current = await uow.ownerships.get_current(dog.id)
    assert current.owner_id == winners[0].current.owner_id
