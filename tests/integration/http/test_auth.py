from __future__ import annotations

from datetime import timedelta

import pytest

PASSWORD = "correct-horse"


async def login(client, email: str, password: str = PASSWORD):
    return await client.post("/api/v1/auth/login", json={"email": email, "password": password})


@pytest.mark.asyncio
async def test_login_and_me(client, users):
    response = await login(client, "owner@example.com")
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["role"] == "OWNER"

    me = await client.get(
        "/api/v1/me", headers={"Authorization": f"Bearer {data['access_token']}"}
    )
    assert me.status_code == 200
    details = me.json()
    assert details["email"] == "owner@example.com"
    assert details["last_login"] is not None
    assert "hashed_password" not in details


@pytest.mark.asyncio
async def test_login_with_wrong_password(client, users):
    response = await login(client, "owner@example.com", "not-the-password")
    assert response.status_code == 401
    assert response.json()["code"] == "auth_error"


@pytest.mark.asyncio
async def test_missing_credential_is_unauthenticated(client, users):
    response = await client.get("/api/v1/me")
    assert response.status_code == 401
    assert response.json()["code"] == "unauthenticated"
    assert response.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_wrong_scheme_is_malformed(client, users):
    response = await client.get("/api/v1/me", headers={"Authorization": "Token abc"})
    assert response.status_code == 401
    assert response.json()["code"] == "malformed_credential"


@pytest.mark.asyncio
async def test_expired_token(client, app, users):
    token = app.state.jwt_service.create_access_token(
        subject=users["owner"].id, role=users["owner"].role, expires_delta=timedelta(hours=-1)
    )
    response = await client.get("/api/v1/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["code"] == "credential_expired"


@pytest.mark.asyncio
async def test_self_registration_then_login(client, users):
    payload = {
        "email": "New.Viewer@Example.com",
        "password": "long-enough",
        "first_name": "New",
        "last_name": "Viewer",
    }
    response = await client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 201
    assert response.json()["email"] == "new.viewer@example.com"
    assert response.json()["role"] == "VIEWER"

    assert (await login(client, "new.viewer@example.com", "long-enough")).status_code == 200

    again = await client.post("/api/v1/auth/register", json=payload)
    assert again.status_code == 409


@pytest.mark.asyncio
async def test_owner_registration_creates_owner_record(client, users, headers):
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "kennel@example.com",
            "password": "long-enough",
            "first_name": "Kim",
            "last_name": "Kennel",
            "role": "OWNER",
            "owner": {"name": "Kim's Kennel", "is_breeder": True},
        },
    )
    assert response.status_code == 201
    owner_id = response.json()["owner_id"]
    assert owner_id is not None

    owner = await client.get(f"/api/v1/owners/{owner_id}", headers=headers["viewer"])
    assert owner.status_code == 200
    assert owner.json()["is_breeder"] is True


@pytest.mark.asyncio
async def test_only_admin_can_create_admin(client, users, headers):
    payload = {
        "email": "second.admin@example.com",
        "password": "long-enough",
        "first_name": "Second",
        "last_name": "Admin",
        "role": "ADMIN",
    }
    anonymous = await client.post("/api/v1/auth/register", json=payload)
    assert anonymous.status_code == 403

    as_owner = await client.post("/api/v1/auth/register", json=payload, headers=headers["owner"])
    assert as_owner.status_code == 403

    as_admin = await client.post("/api/v1/auth/register", json=payload, headers=headers["admin"])
    assert as_admin.status_code == 201
    assert as_admin.json()["role"] == "ADMIN"


@pytest.mark.asyncio
async def test_short_password_rejected(client, users):
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "short@example.com", "password": "abc", "first_name": "S", "last_name": "P"},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


@pytest.mark.asyncio
async def test_role_change_requires_admin(client, users, headers):
    target = users["viewer"].id
    denied = await client.patch(
        f"/api/v1/users/{target}/role", json={"role": "HANDLER"}, headers=headers["owner"]
    )
    assert denied.status_code == 403

    allowed = await client.patch(
        f"/api/v1/users/{target}/role", json={"role": "HANDLER"}, headers=headers["admin"]
    )
    assert allowed.status_code == 200
    assert allowed.json()["role"] == "HANDLER"


@pytest.mark.asyncio
async def test_deactivated_user_token_stops_working(client, users, headers):
    before = await client.get("/api/v1/me", headers=headers["handler"])
    assert before.status_code == 200

    response = await client.post(
        f"/api/v1/users/{users['handler'].id}/deactivate", headers=headers["admin"]
    )
    assert response.status_code == 200
    assert response.json()["is_active"] is False

    after = await client.get("/api/v1/me", headers=headers["handler"])
    assert after.status_code == 401
    assert after.json()["code"] == "invalid_credential"
    assert (await login(client, "handler@example.com")).status_code == 401


@pytest.mark.asyncio
async def test_demoted_user_token_stops_working(client, users, headers):
    promoted = await client.patch(
        f"/api/v1/users/{users['viewer'].id}/role",
        json={"role": "ADMIN"},
        headers=headers["admin"],
    )
    assert promoted.status_code == 200
    fresh = await login(client, "viewer@example.com")
    admin_headers = {"Authorization": f"Bearer {fresh.json()['access_token']}"}
    assert (await client.get("/api/v1/audit-logs", headers=admin_headers)).status_code == 200

    demoted = await client.patch(
        f"/api/v1/users/{users['viewer'].id}/role",
        json={"role": "VIEWER"},
        headers=headers["admin"],
    )
    assert demoted.status_code == 200

    stale = await client.get("/api/v1/audit-logs", headers=admin_headers)
    assert stale.status_code == 401
    assert stale.json()["code"] == "invalid_credential"

    relogged = await login(client, "viewer@example.com")
    assert relogged.json()["role"] == "VIEWER"


@pytest.mark.asyncio
async def test_admin_cannot_deactivate_self(client, users, headers):
    response = await client.post(
        f"/api/v1/users/{users['admin'].id}/deactivate", headers=headers["admin"]
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login_is_audited(client, users, headers):
    await login(client, "club@example.com")
    response = await client.get(
        "/api/v1/audit-logs",
        params={"action": "LOGIN", "user_id": str(users["club"].id)},
        headers=headers["admin"],
    )
    assert response.status_code == 200
    entries = response.json()
    assert len(entries) == 1
    assert entries[0]["entity_type"] == "User"
    assert entries[0]["entity_id"] == str(users["club"].id)


@pytest.mark.asyncio
async def test_user_listing_is_admin_only(client, users, headers):
    denied = await client.get("/api/v1/users", headers=headers["owner"])
    assert denied.status_code == 403

    everyone = await client.get("/api/v1/users", headers=headers["admin"])
    assert everyone.status_code == 200
    assert [item["email"] for item in everyone.json()] == sorted(
        f"{key}@example.com" for key in users
    )
    assert all("hashed_password" not in item for item in everyone.json())

    clubs = await client.get("/api/v1/users", params={"role": "club"}, headers=headers["admin"])
    assert [item["email"] for item in clubs.json()] == ["club@example.com"]

    await client.post(f"/api/v1/users/{users['handler'].id}/deactivate", headers=headers["admin"])
    active = await client.get(
        "/api/v1/users", params={"include_inactive": False}, headers=headers["admin"]
    )
    assert "handler@example.com" not in [item["email"] for item in active.json()]


@pytest.mark.asyncio
async def test_change_own_password(client, users, headers):
    wrong = await client.post(
        "/api/v1/auth/change-password",
        json={"current_password": "not-it", "new_password": "brand-new-secret"},
        headers=headers["owner"],
    )
    assert wrong.status_code == 401

    short = await client.post(
        "/api/v1/auth/change-password",
        json={"current_password": PASSWORD, "new_password": "abc"},
        headers=headers["owner"],
    )
    assert short.status_code == 422

    changed = await client.post(
        "/api/v1/auth/change-password",
        json={"current_password": PASSWORD, "new_password": "brand-new-secret"},
        headers=headers["owner"],
    )
    assert changed.status_code == 200
    assert changed.json() == {"status": "password_changed"}

    assert (await login(client, "owner@example.com")).status_code == 401
    assert (await login(client, "owner@example.com", "brand-new-secret")).status_code == 200

    entries = await client.get(
        "/api/v1/audit-logs",
        params={"action": "UPDATE", "entity_id": str(users["owner"].id)},
        headers=headers["admin"],
    )
    (entry,) = entries.json()
    assert entry["metadata"] == {"password_changed": True, "reset_by_admin": False}


@pytest.mark.asyncio
async def test_admin_resets_password(client, users, headers):
    target = users["handler"].id
    denied = await client.post(
        f"/api/v1/users/{target}/password",
        json={"new_password": "handed-over"},
        headers=headers["owner"],
    )
    assert denied.status_code == 403

    reset = await client.post(
        f"/api/v1/users/{target}/password",
        json={"new_password": "handed-over"},
        headers=headers["admin"],
    )
    assert reset.status_code == 200
    assert (await login(client, "handler@example.com", "handed-over")).status_code == 200
