from __future__ import annotations

import pytest

from pedigree.domain.value_objects.gender import Gender

DOGS = "/api/v1/dogs"


def dog_payload(name: str = "Rex", gender: str = "MALE", **extra) -> dict:
    return {
        "name": name,
        "breed": "Border Collie",
        "gender": gender,
        "date_of_birth": "2021-04-02",
        **extra,
    }


@pytest.mark.asyncio
async def test_new_dog_is_pending_and_hidden_from_anonymous(client, headers):
    response = await client.post(DOGS, json=dog_payload(), headers=headers["owner"])
    assert response.status_code == 201
    dog = response.json()
    assert dog["approval_status"] == "PENDING"
    assert dog["version"] == 1

    anonymous = await client.get(f"{DOGS}/{dog['id']}")
    assert anonymous.status_code == 404

    signed_in = await client.get(f"{DOGS}/{dog['id']}", headers=headers["viewer"])
    assert signed_in.status_code == 200
    assert signed_in.json()["name"] == "Rex"


@pytest.mark.asyncio
async def test_admin_review_workflow(client, headers):
    created = await client.post(DOGS, json=dog_payload(), headers=headers["owner"])
    dog_id = created.json()["id"]

    denied = await client.post(f"{DOGS}/{dog_id}/approve", headers=headers["owner"])
    assert denied.status_code == 403

    approved = await client.post(
        f"{DOGS}/{dog_id}/approve", json={"notes": "papers checked"}, headers=headers["admin"]
    )
    assert approved.status_code == 200
    body = approved.json()
    assert body["approval_status"] == "APPROVED"
    assert body["approval_notes"] == "papers checked"
    assert body["approval_date"] is not None

    again = await client.post(f"{DOGS}/{dog_id}/decline", headers=headers["admin"])
    assert again.status_code == 409

    public = await client.get(f"{DOGS}/{dog_id}")
    assert public.status_code == 200


@pytest.mark.asyncio
async def test_create_requires_writable_role(client, headers):
    anonymous = await client.post(DOGS, json=dog_payload())
    assert anonymous.status_code == 401
    assert anonymous.json()["code"] == "unauthenticated"

    viewer = await client.post(DOGS, json=dog_payload(), headers=headers["viewer"])
    assert viewer.status_code == 403


@pytest.mark.asyncio
async def test_unknown_gender_rejected(client, headers):
    response = await client.post(
        DOGS, json=dog_payload(gender="UNKNOWN"), headers=headers["owner"]
    )
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


@pytest.mark.asyncio
async def test_anonymous_listing_shows_only_approved(client, headers, seed_dog):
    await seed_dog("Approved Ace", Gender.MALE)
    await seed_dog("Pending Pip", Gender.FEMALE, approved=False)

    anonymous = await client.get(DOGS)
    assert anonymous.status_code == 200
    assert [item["name"] for item in anonymous.json()["items"]] == ["Approved Ace"]
    assert anonymous.json()["total"] == 1

    signed_in = await client.get(DOGS, headers=headers["viewer"])
    assert signed_in.json()["total"] == 2


@pytest.mark.asyncio
async def test_bad_token_on_public_listing_degrades_to_anonymous(client, users, seed_dog):
    await seed_dog("Approved Ace", Gender.MALE)
    await seed_dog("Pending Pip", Gender.FEMALE, approved=False)

    response = await client.get(DOGS, headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 200
    assert response.json()["total"] == 1


@pytest.mark.asyncio
async def test_search_matches_name(client, headers, seed_dog):
    await seed_dog("Shadow", Gender.MALE)
    await seed_dog("Misty", Gender.FEMALE)

    response = await client.get(DOGS, params={"search": "sha"}, headers=headers["viewer"])
    assert [item["name"] for item in response.json()["items"]] == ["Shadow"]


@pytest.mark.asyncio
async def test_parent_gender_is_enforced(client, headers, seed_dog):
    pup = await seed_dog("Pup", Gender.MALE)
    not_a_sire = await seed_dog("Bella", Gender.FEMALE)

    response = await client.put(
        f"{DOGS}/{pup.id}/parents",
        json={"sire_id": str(not_a_sire.id)},
        headers=headers["owner"],
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_parent_cycle_is_rejected(client, headers, seed_dog):
    grandsire = await seed_dog("Grandsire", Gender.MALE)
    sire = await seed_dog("Sire", Gender.MALE, sire_id=grandsire.id)
    pup = await seed_dog("Pup", Gender.MALE, sire_id=sire.id)

    response = await client.put(
        f"{DOGS}/{grandsire.id}/parents",
        json={"sire_id": str(pup.id)},
        headers=headers["owner"],
    )
    assert response.status_code == 409
    assert response.json()["code"] == "conflict"


@pytest.mark.asyncio
async def test_pedigree_tree(client, headers, seed_dog):
    grandsire = await seed_dog("Grandsire", Gender.MALE)
    sire = await seed_dog("Sire", Gender.MALE, sire_id=grandsire.id)
    dam = await seed_dog("Dam", Gender.FEMALE)
    pup = await seed_dog("Pup", Gender.FEMALE, sire_id=sire.id, dam_id=dam.id)

    response = await client.get(f"{DOGS}/{pup.id}/pedigree", params={"generations": 3})
    assert response.status_code == 200
    tree = response.json()
    assert tree["generation"] == 1
    assert tree["sire"]["name"] == "Sire"
    assert tree["sire"]["sire"]["name"] == "Grandsire"
    assert tree["sire"]["sire"]["generation"] == 3
    assert tree["dam"]["name"] == "Dam"
    assert tree["dam"]["sire"] is None

    shallow = await client.get(f"{DOGS}/{pup.id}/pedigree", params={"generations": 2})
    assert shallow.json()["sire"]["sire"] is None


@pytest.mark.asyncio
async def test_linebreeding_for_half_siblings(client, headers, seed_dog):
    common_sire = await seed_dog("Patriarch", Gender.MALE)
    first_dam = await seed_dog("First Dam", Gender.FEMALE)
    second_dam = await seed_dog("Second Dam", Gender.FEMALE)
    male = await seed_dog("Half Brother", Gender.MALE, sire_id=common_sire.id, dam_id=first_dam.id)
    female = await seed_dog(
        "Half Sister", Gender.FEMALE, sire_id=common_sire.id, dam_id=second_dam.id
    )

    response = await client.get(
        f"{DOGS}/linebreeding",
        params={"sire_id": str(male.id), "dam_id": str(female.id), "generations": 3},
        headers=headers["handler"],
    )
    assert response.status_code == 200
    analysis = response.json()
    assert analysis["inbreeding_coefficient"] == pytest.approx(0.125)
    assert analysis["genetic_diversity"] == pytest.approx(0.875)
    assert len(analysis["common_ancestors"]) == 1
    ancestor = analysis["common_ancestors"][0]
    assert ancestor["name"] == "Patriarch"
    assert ancestor["occurrences"] == 2


@pytest.mark.asyncio
async def test_linebreeding_requires_authentication(client, users, seed_dog):
    male = await seed_dog("Sire", Gender.MALE)
    female = await seed_dog("Dam", Gender.FEMALE)
    response = await client.get(
        f"{DOGS}/linebreeding", params={"sire_id": str(male.id), "dam_id": str(female.id)}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_update_with_stale_version_conflicts(client, headers, seed_dog):
    dog = await seed_dog("Rex", Gender.MALE)

    first = await client.patch(
        f"{DOGS}/{dog.id}", json={"version": 1, "color": "black"}, headers=headers["owner"]
    )
    assert first.status_code == 200
    assert first.json()["version"] == 2
    assert first.json()["color"] == "black"

    stale = await client.patch(
        f"{DOGS}/{dog.id}", json={"version": 1, "color": "tan"}, headers=headers["owner"]
    )
    assert stale.status_code == 409


@pytest.mark.asyncio
async def test_delete_is_admin_only_and_audited(client, headers, seed_dog):
    dog = await seed_dog("Rex", Gender.MALE)

    denied = await client.delete(f"{DOGS}/{dog.id}", headers=headers["owner"])
    assert denied.status_code == 403

    deleted = await client.delete(f"{DOGS}/{dog.id}", headers=headers["admin"])
    assert deleted.status_code == 204

    missing = await client.get(f"{DOGS}/{dog.id}", headers=headers["admin"])
    assert missing.status_code == 404

    entries = await client.get(
        "/api/v1/audit-logs",
        params={"action": "DELETE", "entity_id": str(dog.id)},
        headers=headers["admin"],
    )
    assert entries.status_code == 200
    assert len(entries.json()) == 1
    assert entries.json()[0]["entity_type"] == "Dog"
    assert entries.json()[0]["previous_state"] is not None


@pytest.mark.asyncio
async def test_health_records_for_dog(client, headers, seed_dog):
    dog = await seed_dog("Rex", Gender.MALE)

    created = await client.post(
        f"{DOGS}/{dog.id}/health-records",
        json={
            "record_date": "2022-05-01",
            "type": "test",
            "description": "Hip score",
            "results": "Excellent",
        },
        headers=headers["owner"],
    )
    assert created.status_code == 201

    listed = await client.get(f"{DOGS}/{dog.id}/health-records", headers=headers["viewer"])
    assert listed.status_code == 200
    assert [item["results"] for item in listed.json()] == ["Excellent"]
    assert listed.json()[0]["type"] == "TEST"

    anonymous = await client.get(f"{DOGS}/{dog.id}/health-records")
    assert anonymous.status_code == 401


@pytest.mark.asyncio
async def test_gender_fixed_once_dog_is_paired(client, headers, seed_dog):
    sire = await seed_dog("Storm", Gender.MALE)
    dam = await seed_dog("Willow", Gender.FEMALE)
    pair = await client.post(
        "/api/v1/breeding-pairs",
        json={"sire_id": str(sire.id), "dam_id": str(dam.id)},
        headers=headers["owner"],
    )
    assert pair.status_code == 201

    response = await client.patch(
        f"{DOGS}/{sire.id}", json={"version": 1, "gender": "FEMALE"}, headers=headers["admin"]
    )
    assert response.status_code == 409
    assert response.json()["details"] == {"breeding_pairs": 1}

    unchanged = await client.get(f"{DOGS}/{sire.id}", headers=headers["viewer"])
    assert unchanged.json()["gender"] == "MALE"


@pytest.mark.asyncio
async def test_health_record_update_and_delete(client, headers, seed_dog):
    dog = await seed_dog("Rex", Gender.MALE)
    other = await seed_dog("Bess", Gender.FEMALE)
    created = await client.post(
        f"{DOGS}/{dog.id}/health-records",
        json={"record_date": "2022-05-01", "type": "vaccination", "description": "Rabies"},
        headers=headers["owner"],
    )
    record_id = created.json()["id"]

    updated = await client.patch(
        f"{DOGS}/{dog.id}/health-records/{record_id}",
        json={"type": "test", "results": "Negative"},
        headers=headers["owner"],
    )
    assert updated.status_code == 200
    assert updated.json()["type"] == "TEST"
    assert updated.json()["results"] == "Negative"
    assert updated.json()["description"] == "Rabies"

    wrong_dog = await client.patch(
        f"{DOGS}/{other.id}/health-records/{record_id}",
        json={"notes": "misfiled"},
        headers=headers["owner"],
    )
    assert wrong_dog.status_code == 404

    denied = await client.delete(
        f"{DOGS}/{dog.id}/health-records/{record_id}", headers=headers["owner"]
    )
    assert denied.status_code == 403

    deleted = await client.delete(
        f"{DOGS}/{dog.id}/health-records/{record_id}", headers=headers["admin"]
    )
    assert deleted.status_code == 204
    listed = await client.get(f"{DOGS}/{dog.id}/health-records", headers=headers["viewer"])
    assert listed.json() == []

    entries = await client.get(
        "/api/v1/audit-logs",
        params={"entity_type": "HealthRecord", "entity_id": record_id},
        headers=headers["admin"],
    )
    assert sorted(entry["action"] for entry in entries.json()) == ["CREATE", "DELETE", "UPDATE"]


@pytest.mark.asyncio
async def test_competition_result_update_and_delete(client, headers, seed_dog):
    dog = await seed_dog("Rex", Gender.MALE)
    created = await client.post(
        f"{DOGS}/{dog.id}/competition-results",
        json={"competition_name": "Spring Trial", "competition_date": "2023-03-12", "rank": 3},
        headers=headers["handler"],
    )
    assert created.status_code == 201
    result_id = created.json()["id"]

    updated = await client.patch(
        f"{DOGS}/{dog.id}/competition-results/{result_id}",
        json={"rank": 1, "title_earned": "CH"},
        headers=headers["handler"],
    )
    assert updated.status_code == 200
    assert updated.json()["rank"] == 1
    assert updated.json()["title_earned"] == "CH"

    bad_rank = await client.patch(
        f"{DOGS}/{dog.id}/competition-results/{result_id}",
        json={"rank": 0},
        headers=headers["handler"],
    )
    assert bad_rank.status_code == 422

    viewer = await client.patch(
        f"{DOGS}/{dog.id}/competition-results/{result_id}",
        json={"rank": 2},
        headers=headers["viewer"],
    )
    assert viewer.status_code == 403

    deleted = await client.delete(
        f"{DOGS}/{dog.id}/competition-results/{result_id}", headers=headers["admin"]
    )
    assert deleted.status_code == 204
    missing = await client.delete(
        f"{DOGS}/{dog.id}/competition-results/{result_id}", headers=headers["admin"]
    )
    assert missing.status_code == 404
