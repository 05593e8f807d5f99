from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

import pytest
from jose import jwt

from pedigree.application.errors import (
    CredentialExpired,
    Forbidden,
    InvalidCredential,
    MalformedCredential,
    Unauthenticated,
)
from pedigree.domain.value_objects.role import Role
from pedigree.infrastructure.auth.context import (
    authenticate,
    authenticate_optional,
    parse_bearer,
    require_role,
)
from pedigree.infrastructure.auth.jwt_service import JWTService

SECRET = "unit-secret"


@pytest.fixture()
def service() -> JWTService:
    return JWTService(secret_key=SECRET, issuer="registry", audience="registry-api")


def test_parse_bearer_variants():
    assert parse_bearer("Bearer abc") == "abc"
    assert parse_bearer("bearer   abc ") == "abc"
    with pytest.raises(Unauthenticated):
        parse_bearer(None)
    with pytest.raises(Unauthenticated):
        parse_bearer("  ")
    with pytest.raises(MalformedCredential):
        parse_bearer("Basic dXNlcjpwYXNz")
    with pytest.raises(MalformedCredential):
        parse_bearer("Bearer")


def test_authenticate_round_trip(service):
    user_id = uuid4()
    token = service.create_access_token(subject=user_id, role=Role.OWNER, email="o@example.com")
    context = authenticate(f"Bearer {token}", service)
    assert context.user_id == user_id
    assert context.role is Role.OWNER
    assert context.email == "o@example.com"
    assert context.actor("10.0.0.1").ip_address == "10.0.0.1"


def test_expired_token_is_reported_as_expired(service):
    token = service.create_access_token(
        subject=uuid4(), role=Role.VIEWER, expires_delta=timedelta(minutes=-5)
    )
    with pytest.raises(CredentialExpired):
        authenticate(f"Bearer {token}", service)


def test_leeway_accepts_recently_expired_token():
    lenient = JWTService(secret_key=SECRET, leeway_seconds=60)
    token = lenient.create_access_token(
        subject=uuid4(), role=Role.VIEWER, expires_delta=timedelta(seconds=-5)
    )
    assert authenticate(f"Bearer {token}", lenient).role is Role.VIEWER


def test_wrong_signature_is_invalid(service):
    other = JWTService(secret_key="other-secret", issuer="registry", audience="registry-api")
    token = other.create_access_token(subject=uuid4(), role=Role.ADMIN)
    with pytest.raises(InvalidCredential):
        authenticate(f"Bearer {token}", service)


def test_wrong_audience_is_invalid(service):
    other = JWTService(secret_key=SECRET, issuer="registry", audience="someone-else")
    token = other.create_access_token(subject=uuid4(), role=Role.ADMIN)
    with pytest.raises(InvalidCredential):
        authenticate(f"Bearer {token}", service)


def test_unknown_role_claim_is_invalid():
    service = JWTService(secret_key=SECRET)
    token = jwt.encode({"sub": str(uuid4()), "role": "EMPEROR"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidCredential):
        authenticate(f"Bearer {token}", service)


def test_non_access_token_is_invalid():
    service = JWTService(secret_key=SECRET)
    token = jwt.encode(
        {"sub": str(uuid4()), "role": "ADMIN", "typ": "refresh"}, SECRET, algorithm="HS256"
    )
    with pytest.raises(InvalidCredential):
        authenticate(f"Bearer {token}", service)


def test_authenticate_optional_swallows_bad_credentials(service):
    assert authenticate_optional(None, service) is None
    assert authenticate_optional("Bearer not-a-jwt", service) is None
    assert authenticate_optional("Token abc", service) is None


def test_require_role(service):
    token = service.create_access_token(subject=uuid4(), role=Role.HANDLER)
    context = authenticate(f"Bearer {token}", service)
    assert require_role(context, Role.HANDLER) is context
    with pytest.raises(Forbidden):
        require_role(context, Role.ADMIN)
    with pytest.raises(Unauthenticated):
        require_role(None, Role.ADMIN)
