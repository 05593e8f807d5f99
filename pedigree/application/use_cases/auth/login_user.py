from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import AuthError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role
from pedigree.infrastructure.auth.jwt_service import JWTService
from pedigree.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class LoginInput:
    email: str
    password: str


@dataclass(slots=True)
class LoginResult:
    access_token: str
    token_type: str
    user_id: UUID
    email: str
    role: Role


async def execute(
    *,
    uow: UnitOfWork,
    payload: LoginInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
    ip_address: str | None = None,
) -> LoginResult:
    user = await uow.users.get_by_email(payload.email.strip().lower())
    if not user or not user.is_active:
        raise AuthError("Invalid credentials")
    if not password_hasher.verify(payload.password, user.hashed_password):
        raise AuthError("Invalid credentials")

    await uow.users.update(user.id, {"last_login": datetime.now(timezone.utc)})
    await audit.record(
        uow,
        actor=Actor(user_id=user.id, role=user.role, ip_address=ip_address),
        action=AuditAction.LOGIN,
        entity_type="User",
        entity_id=user.id,
    )
    await uow.commit()

    token = jwt_service.create_access_token(subject=user.id, role=user.role, email=user.email)
    return LoginResult(
        access_token=token,
        token_type="bearer",
        user_id=user.id,
        email=user.email,
        role=user.role,
    )
