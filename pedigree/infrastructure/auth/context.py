"""Request identity: bearer parsing, token verification and role gating.

``authenticate`` and ``authenticate_optional`` share one decoding path; the
optional variant only differs in turning an auth failure into ``None``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from pedigree.application.actor import Actor
from pedigree.application.errors import (
    AuthError,
    Forbidden,
    InvalidCredential,
    MalformedCredential,
    Unauthenticated,
)
from pedigree.domain.value_objects.role import Role
from pedigree.infrastructure.auth.jwt_service import JWTService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AuthContext:
    user_id: UUID
    role: Role
    email: str | None = None
    claims: dict[str, Any] = field(default_factory=dict)

    def actor(self, ip_address: str | None = None) -> Actor:
        return Actor(user_id=self.user_id, role=self.role, ip_address=ip_address)


def parse_bearer(header: str | None) -> str:
    if header is None or not header.strip():
        raise Unauthenticated("Missing bearer token")
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise MalformedCredential("Authorization header must be 'Bearer <token>'")
    return token.strip()


def _context_from_claims(claims: dict[str, Any]) -> AuthContext:
    try:
        user_id = UUID(str(claims["sub"]))
        role = Role(str(claims["role"]).upper())
    except (KeyError, ValueError) as exc:
        raise InvalidCredential("Token is missing a valid subject or role") from exc
    if claims.get("typ", "access") != "access":
        raise InvalidCredential("Token is not an access token")
    return AuthContext(user_id=user_id, role=role, email=claims.get("email"), claims=claims)


def authenticate(header: str | None, jwt_service: JWTService) -> AuthContext:
    token = parse_bearer(header)
    return _context_from_claims(jwt_service.decode(token))


def authenticate_optional(header: str | None, jwt_service: JWTService) -> AuthContext | None:
    if header is None:
        return None
    try:
        return authenticate(header, jwt_service)
    except AuthError as exc:
        logger.debug("Ignoring credential on tolerant route: %s", exc.code)
        return None


def require_role(identity: AuthContext | None, role: Role) -> AuthContext:
    if identity is None:
        raise Unauthenticated("Authentication required")
    if identity.role != role:
        raise Forbidden(f"{role.value} role required")
    return identity
