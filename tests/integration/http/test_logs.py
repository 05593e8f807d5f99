from __future__ import annotations

import pytest
from starlette.requests import Request

from pedigree.domain.value_objects.gender import Gender
from pedigree.interfaces.middleware.error_handler import persist_system_log

API = "/api/v1"


@pytest.mark.asyncio
async def test_audit_log_is_admin_only(client, headers):
    for key in ("owner", "handler", "club", "viewer"):
        response = await client.get(f"{API}/audit-logs", headers=headers[key])
        assert response.status_code == 403

    anonymous = await client.get(f"{API}/audit-logs")
    assert anonymous.status_code == 401


@pytest.mark.asyncio
async def test_mutation_writes_one_audit_entry(client, users, headers, seed_dog):
    dog = await seed_dog("Rex", Gender.MALE, approved=False)
    approved = await client.post(f"{API}/dogs/{dog.id}/approve", headers=headers["admin"])
    assert approved.status_code == 200

    entries = await client.get(
        f"{API}/audit-logs",
        params={"entity_type": "Dog", "entity_id": str(dog.id)},
        headers=headers["admin"],
    )
    assert entries.status_code == 200
    [entry] = entries.json()
    assert entry["action"] == "APPROVE"
    assert entry["user_id"] == str(users["admin"].id)
    assert '"PENDING"' in entry["previous_state"]
    assert '"APPROVED"' in entry["new_state"]

    single = await client.get(f"{API}/audit-logs/{entry['id']}", headers=headers["admin"])
    assert single.status_code == 200
    assert single.json()["id"] == entry["id"]


@pytest.mark.asyncio
async def test_rejected_mutation_leaves_no_audit_entry(client, headers, seed_dog):
    dog = await seed_dog("Rex", Gender.MALE)
    response = await client.patch(
        f"{API}/dogs/{dog.id}", json={"version": 7, "color": "red"}, headers=headers["owner"]
    )
    assert response.status_code == 409

    entries = await client.get(
        f"{API}/audit-logs", params={"entity_id": str(dog.id)}, headers=headers["admin"]
    )
    assert entries.json() == []


@pytest.mark.asyncio
async def test_unknown_audit_entry(client, headers):
    response = await client.get(f"{API}/audit-logs/999", headers=headers["admin"])
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_system_log_records_unexpected_errors(client, app, users, headers):
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/api/v1/boom",
        "query_string": b"",
        "headers": [],
        "client": ("10.0.0.9", 5000),
        "app": app,
    }
    try:
        raise RuntimeError("disk on fire")
    except RuntimeError as exc:
        await persist_system_log(Request(scope), exc)

    denied = await client.get(f"{API}/system-logs", headers=headers["owner"])
    assert denied.status_code == 403

    response = await client.get(
        f"{API}/system-logs", params={"level": "error"}, headers=headers["admin"]
    )
    assert response.status_code == 200
    [entry] = response.json()
    assert entry["message"] == "disk on fire"
    assert entry["source"] == "GET /api/v1/boom"
    assert entry["ip_address"] == "10.0.0.9"
    assert "RuntimeError" in entry["stack_trace"]
