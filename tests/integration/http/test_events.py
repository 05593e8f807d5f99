from __future__ import annotations

from uuid import uuid4

import pytest

from pedigree.domain.value_objects.gender import Gender

API = "/api/v1"


def event_payload(**extra) -> dict:
    return {
        "title": "Spring Trial",
        "description": "Open sheepdog trial",
        "event_type": "competition",
        "start_date": "2030-04-01T09:00:00Z",
        "end_date": "2030-04-02T17:00:00Z",
        "location": "Bala",
        "organizer": "Valley Club",
        **extra,
    }


@pytest.mark.asyncio
async def test_club_and_event_creation_roles(client, headers):
    denied = await client.post(
        f"{API}/clubs", json={"name": "Valley Club"}, headers=headers["owner"]
    )
    assert denied.status_code == 403

    club = await client.post(
        f"{API}/clubs",
        json={"name": "Valley Club", "contact_email": "secretary@valleyclub.org"},
        headers=headers["club"],
    )
    assert club.status_code == 201

    event = await client.post(
        f"{API}/events", json=event_payload(club_id=club.json()["id"]), headers=headers["club"]
    )
    assert event.status_code == 201
    assert event.json()["event_type"] == "COMPETITION"
    assert event.json()["is_published"] is False


@pytest.mark.asyncio
async def test_event_dates_validated(client, headers):
    response = await client.post(
        f"{API}/events",
        json=event_payload(start_date="2030-04-03T09:00:00Z"),
        headers=headers["admin"],
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_registration_requires_published_event(client, headers, seed_dog):
    dog = await seed_dog("Rex", Gender.MALE)
    event = await client.post(f"{API}/events", json=event_payload(), headers=headers["admin"])
    event_id = event.json()["id"]

    closed = await client.post(
        f"{API}/events/{event_id}/registrations",
        json={"dog_id": str(dog.id)},
        headers=headers["handler"],
    )
    assert closed.status_code == 422

    published = await client.post(f"{API}/events/{event_id}/publish", headers=headers["admin"])
    assert published.status_code == 200
    assert published.json()["is_published"] is True

    registered = await client.post(
        f"{API}/events/{event_id}/registrations",
        json={"dog_id": str(dog.id)},
        headers=headers["handler"],
    )
    assert registered.status_code == 201

    again = await client.post(
        f"{API}/events/{event_id}/registrations",
        json={"dog_id": str(dog.id)},
        headers=headers["handler"],
    )
    assert again.status_code == 409

    listed = await client.get(f"{API}/events/{event_id}/registrations", headers=headers["viewer"])
    assert [item["dog_id"] for item in listed.json()] == [str(dog.id)]


@pytest.mark.asyncio
async def test_registration_after_deadline_rejected(client, headers, seed_dog):
    dog = await seed_dog("Rex", Gender.MALE)
    event = await client.post(
        f"{API}/events",
        json=event_payload(registration_deadline="2020-01-01T00:00:00Z"),
        headers=headers["admin"],
    )
    event_id = event.json()["id"]
    await client.post(f"{API}/events/{event_id}/publish", headers=headers["admin"])

    response = await client.post(
        f"{API}/events/{event_id}/registrations",
        json={"dog_id": str(dog.id)},
        headers=headers["handler"],
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_event_listing_hides_drafts(client, headers):
    draft = await client.post(
        f"{API}/events", json=event_payload(title="Autumn Show"), headers=headers["admin"]
    )
    live = await client.post(
        f"{API}/events",
        json=event_payload(event_type="seminar", start_date="2030-03-01T09:00:00Z"),
        headers=headers["admin"],
    )
    await client.post(f"{API}/events/{live.json()['id']}/publish", headers=headers["admin"])

    public = await client.get(f"{API}/events", headers=headers["viewer"])
    assert public.status_code == 200
    assert [item["id"] for item in public.json()] == [live.json()["id"]]

    denied = await client.get(
        f"{API}/events", params={"include_unpublished": True}, headers=headers["viewer"]
    )
    assert denied.status_code == 403

    everything = await client.get(
        f"{API}/events", params={"include_unpublished": True}, headers=headers["club"]
    )
    assert [item["id"] for item in everything.json()] == [
        live.json()["id"],
        draft.json()["id"],
    ]

    shows = await client.get(
        f"{API}/events",
        params={"include_unpublished": True, "search": "autumn"},
        headers=headers["admin"],
    )
    assert [item["title"] for item in shows.json()] == ["Autumn Show"]

    seminars = await client.get(
        f"{API}/events", params={"event_type": "seminar"}, headers=headers["viewer"]
    )
    assert [item["event_type"] for item in seminars.json()] == ["SEMINAR"]


@pytest.mark.asyncio
async def test_event_update(client, headers):
    event = await client.post(f"{API}/events", json=event_payload(), headers=headers["club"])
    event_id = event.json()["id"]

    moved = await client.patch(
        f"{API}/events/{event_id}",
        json={"location": "Corwen", "end_date": "2030-04-03T17:00:00Z"},
        headers=headers["club"],
    )
    assert moved.status_code == 200
    assert moved.json()["location"] == "Corwen"
    assert moved.json()["title"] == "Spring Trial"

    backwards = await client.patch(
        f"{API}/events/{event_id}",
        json={"start_date": "2030-04-05T09:00:00Z"},
        headers=headers["club"],
    )
    assert backwards.status_code == 422

    denied = await client.patch(
        f"{API}/events/{event_id}", json={"location": "Ruthin"}, headers=headers["owner"]
    )
    assert denied.status_code == 403

    missing = await client.patch(
        f"{API}/events/{uuid4()}",
        json={"location": "Ruthin"},
        headers=headers["admin"],
    )
    assert missing.status_code == 404
