from __future__ import annotations

import pytest

from pedigree.domain.value_objects.gender import Gender

API = "/api/v1"


async def create_merle_trait(client, headers):
    response = await client.post(
        f"{API}/genetic-traits",
        json={
            "name": "Merle",
            "inheritance_pattern": "incomplete_dominance",
            "alleles": [
                {"symbol": "M", "name": "Merle", "dominant": True},
                {"symbol": "m", "name": "Non-merle"},
            ],
        },
        headers=headers["admin"],
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_traits_are_admin_defined(client, headers):
    denied = await client.post(
        f"{API}/genetic-traits",
        json={"name": "Merle", "inheritance_pattern": "POLYGENIC"},
        headers=headers["owner"],
    )
    assert denied.status_code == 403

    trait = await create_merle_trait(client, headers)
    assert trait["inheritance_pattern"] == "INCOMPLETE_DOMINANCE"
    assert sorted(a["symbol"] for a in trait["alleles"]) == ["M", "m"]

    listed = await client.get(f"{API}/genetic-traits", headers=headers["viewer"])
    assert [item["name"] for item in listed.json()] == ["Merle"]


@pytest.mark.asyncio
async def test_genotype_must_use_trait_alleles(client, headers, seed_dog):
    trait = await create_merle_trait(client, headers)
    dog = await seed_dog("Rex", Gender.MALE)

    bad = await client.post(
        f"{API}/dogs/{dog.id}/genotypes",
        json={"trait_id": trait["id"], "genotype": "M/x"},
        headers=headers["owner"],
    )
    assert bad.status_code == 422

    good = await client.post(
        f"{API}/dogs/{dog.id}/genotypes",
        json={
            "trait_id": trait["id"],
            "genotype": "M / m",
            "test_method": "dna_test",
            "confidence": 0.99,
        },
        headers=headers["owner"],
    )
    assert good.status_code == 201
    assert good.json()["genotype"] == "M/m"
    assert good.json()["test_method"] == "DNA_TEST"

    listed = await client.get(f"{API}/dogs/{dog.id}/genotypes", headers=headers["viewer"])
    assert [item["genotype"] for item in listed.json()] == ["M/m"]


@pytest.mark.asyncio
async def test_breed_prevalence_upsert(client, headers):
    trait = await create_merle_trait(client, headers)
    payload = {"breed": "Border Collie", "trait_id": trait["id"], "frequency": 0.1}

    first = await client.put(f"{API}/breed-prevalences", json=payload, headers=headers["admin"])
    assert first.status_code == 200
    second = await client.put(
        f"{API}/breed-prevalences", json={**payload, "frequency": 0.2}, headers=headers["admin"]
    )
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["frequency"] == pytest.approx(0.2)

    out_of_range = await client.put(
        f"{API}/breed-prevalences", json={**payload, "frequency": 1.5}, headers=headers["admin"]
    )
    assert out_of_range.status_code == 422


@pytest.mark.asyncio
async def test_genetic_analysis_is_stored(client, headers, seed_dog):
    trait = await create_merle_trait(client, headers)
    sire = await seed_dog("Storm", Gender.MALE)
    dam = await seed_dog("Willow", Gender.FEMALE)

    created = await client.post(
        f"{API}/genetic-analyses",
        json={
            "sire_id": str(sire.id),
            "dam_id": str(dam.id),
            "overall_compatibility": 0.8,
            "predictions": [
                {"trait_id": trait["id"], "possible_genotypes": {"M/m": 0.5, "m/m": 0.5}}
            ],
        },
        headers=headers["owner"],
    )
    assert created.status_code == 201
    analysis_id = created.json()["id"]

    fetched = await client.get(f"{API}/genetic-analyses/{analysis_id}", headers=headers["viewer"])
    assert fetched.status_code == 200
    prediction = fetched.json()["predictions"][0]
    assert prediction["possible_genotypes"] == {"M/m": 0.5, "m/m": 0.5}

    overweight = await client.post(
        f"{API}/genetic-analyses",
        json={
            "sire_id": str(sire.id),
            "dam_id": str(dam.id),
            "overall_compatibility": 0.8,
            "predictions": [
                {"trait_id": trait["id"], "possible_genotypes": {"M/m": 0.7, "m/m": 0.5}}
            ],
        },
        headers=headers["owner"],
    )
    assert overweight.status_code == 422
