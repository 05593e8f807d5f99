from __future__ import annotations

import pytest

API = "/api/v1"


async def create_breed(client, headers, name: str = "Border Collie", **extra):
    response = await client.post(
        f"{API}/breeds", json={"name": name, "group": "Herding", **extra}, headers=headers["owner"]
    )
    assert response.status_code == 201, response.text
    return response.json()


def dog_payload(name: str, **extra) -> dict:
    return {"name": name, "gender": "MALE", "date_of_birth": "2021-04-02", **extra}


@pytest.mark.asyncio
async def test_breed_creation_and_lookup(client, headers):
    denied = await client.post(
        f"{API}/breeds", json={"name": "Beagle"}, headers=headers["viewer"]
    )
    assert denied.status_code == 403

    breed = await create_breed(client, headers, origin="Scotland")
    duplicate = await client.post(
        f"{API}/breeds", json={"name": "border collie"}, headers=headers["owner"]
    )
    assert duplicate.status_code == 409

    by_name = await client.get(f"{API}/breeds/by-name/BORDER COLLIE", headers=headers["viewer"])
    assert by_name.status_code == 200
    assert by_name.json()["id"] == breed["id"]

    await create_breed(client, headers, "Beagle", group="Hound")
    listed = await client.get(f"{API}/breeds", headers=headers["viewer"])
    assert [item["name"] for item in listed.json()] == ["Beagle", "Border Collie"]
    searched = await client.get(
        f"{API}/breeds", params={"search": "coll"}, headers=headers["viewer"]
    )
    assert [item["name"] for item in searched.json()] == ["Border Collie"]


@pytest.mark.asyncio
async def test_dogs_link_to_registered_breeds(client, headers):
    breed = await create_breed(client, headers)

    by_id = await client.post(
        f"{API}/dogs", json=dog_payload("Rex", breed_id=breed["id"]), headers=headers["owner"]
    )
    assert by_id.status_code == 201
    assert by_id.json()["breed"] == "Border Collie"
    assert by_id.json()["breed_id"] == breed["id"]

    by_name = await client.post(
        f"{API}/dogs", json=dog_payload("Fly", breed="border collie"), headers=headers["owner"]
    )
    assert by_name.json()["breed_id"] == breed["id"]
    assert by_name.json()["breed"] == "Border Collie"

    unregistered = await client.post(
        f"{API}/dogs", json=dog_payload("Odd", breed="Lurcher"), headers=headers["owner"]
    )
    assert unregistered.status_code == 201
    assert unregistered.json()["breed_id"] is None

    mismatch = await client.post(
        f"{API}/dogs",
        json=dog_payload("Mix", breed="Beagle", breed_id=breed["id"]),
        headers=headers["owner"],
    )
    assert mismatch.status_code == 422

    no_breed = await client.post(f"{API}/dogs", json=dog_payload("Blank"), headers=headers["owner"])
    assert no_breed.status_code == 422


@pytest.mark.asyncio
async def test_breed_rename_reaches_linked_dogs(client, headers):
    breed = await create_breed(client, headers)
    dog = await client.post(
        f"{API}/dogs", json=dog_payload("Rex", breed_id=breed["id"]), headers=headers["owner"]
    )

    denied = await client.patch(
        f"{API}/breeds/{breed['id']}", json={"name": "Collie"}, headers=headers["owner"]
    )
    assert denied.status_code == 403

    renamed = await client.patch(
        f"{API}/breeds/{breed['id']}",
        json={"name": "Border Collie (Working)"},
        headers=headers["admin"],
    )
    assert renamed.status_code == 200
    assert renamed.json()["group"] == "Herding"

    fetched = await client.get(f"{API}/dogs/{dog.json()['id']}", headers=headers["admin"])
    assert fetched.json()["breed"] == "Border Collie (Working)"
    assert fetched.json()["version"] == 2


@pytest.mark.asyncio
async def test_breed_delete_refused_while_dogs_linked(client, headers):
    breed = await create_breed(client, headers)
    unused = await create_breed(client, headers, "Beagle")
    dog = await client.post(
        f"{API}/dogs", json=dog_payload("Rex", breed_id=breed["id"]), headers=headers["owner"]
    )

    denied = await client.delete(f"{API}/breeds/{unused['id']}", headers=headers["owner"])
    assert denied.status_code == 403

    linked = await client.delete(f"{API}/breeds/{breed['id']}", headers=headers["admin"])
    assert linked.status_code == 409
    assert linked.json()["details"] == {"dogs": 1}

    deleted = await client.delete(f"{API}/breeds/{unused['id']}", headers=headers["admin"])
    assert deleted.status_code == 204
    gone = await client.get(f"{API}/breeds/{unused['id']}", headers=headers["viewer"])
    assert gone.status_code == 404

    await client.delete(f"{API}/dogs/{dog.json()['id']}", headers=headers["admin"])
    freed = await client.delete(f"{API}/breeds/{breed['id']}", headers=headers["admin"])
    assert freed.status_code == 204
