from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import AuthError, Forbidden, NotFound, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.use_cases.auth.register_user import MIN_PASSWORD_LENGTH
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role
from pedigree.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class ChangePasswordInput:
    user_id: UUID
    new_password: str
    current_password: str | None = None


async def execute(
    *,
    uow: UnitOfWork,
    actor: Actor,
    payload: ChangePasswordInput,
    password_hasher: PasswordHasher,
) -> None:
    """Users change their own password; administrators may reset anyone else's."""
    is_self = actor.user_id == payload.user_id
    if not is_self and actor.role is not Role.ADMIN:
        raise Forbidden("Cannot change password for other users")
    target = await uow.users.get(payload.user_id)
    if not target:
        raise NotFound("User not found")
    if is_self and not password_hasher.verify(
        payload.current_password or "", target.hashed_password
    ):
        raise AuthError("Incorrect current password")
    if len(payload.new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )

    await uow.users.update(
        payload.user_id,
        {
            "hashed_password": password_hasher.hash(payload.new_password),
            "updated_at": datetime.now(timezone.utc),
        },
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.UPDATE,
        entity_type="User",
        entity_id=payload.user_id,
        metadata={"password_changed": True, "reset_by_admin": not is_self},
    )
    await uow.commit()
