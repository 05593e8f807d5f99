from __future__ import annotations

from dataclasses import dataclass

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import ConflictError, Forbidden, ValidationError
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import parse_enum, require_text
from pedigree.domain.models.owner import Owner
from pedigree.domain.models.user import User
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role
from pedigree.infrastructure.auth.password import PasswordHasher

MIN_PASSWORD_LENGTH = 8


@dataclass(slots=True)
class OwnerDetails:
    name: str
    contact_phone: str | None = None
    address: str | None = None
    is_breeder: bool = False


@dataclass(slots=True)
class RegisterUserInput:
    email: str
    password: str
    first_name: str
    last_name: str
    role: str | Role = Role.VIEWER
    owner: OwnerDetails | None = None


async def execute(
    *,
    uow: UnitOfWork,
    payload: RegisterUserInput,
    password_hasher: PasswordHasher,
    requester: Actor | None = None,
) -> User:
    """Self-service signup; only an authenticated admin may mint another admin."""
    role = parse_enum(Role, payload.role, "role")
    if role is Role.ADMIN and (requester is None or requester.role is not Role.ADMIN):
        raise Forbidden("Only administrators can create admin accounts")
    if len(payload.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    email = require_text(payload.email, "email").lower()
    if await uow.users.get_by_email(email):
        raise ConflictError("Email already registered", details={"email": email})

    owner_id = None
    if role is Role.OWNER and payload.owner is not None:
        owner = await uow.owners.add(
            Owner.create(
                name=require_text(payload.owner.name, "owner.name"),
                contact_email=email,
                contact_phone=payload.owner.contact_phone,
                address=payload.owner.address,
                is_breeder=payload.owner.is_breeder,
            )
        )
        owner_id = owner.id

    user = await uow.users.add(
        User.create(
            email=email,
            hashed_password=password_hasher.hash(payload.password),
            first_name=require_text(payload.first_name, "first_name"),
            last_name=require_text(payload.last_name, "last_name"),
            role=role,
            owner_id=owner_id,
        )
    )
    await audit.record(
        uow,
        actor=requester or Actor(user_id=user.id, role=user.role),
        action=AuditAction.CREATE,
        entity_type="User",
        entity_id=user.id,
        after=user,
    )
    await uow.commit()
    return user
