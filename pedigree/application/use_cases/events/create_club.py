from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.errors import Forbidden
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.application.validators import require_text
from pedigree.domain.models.club import Club
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateClubInput:
    name: str
    description: str | None = None
    established_date: date | None = None
    location: str | None = None
    contact_email: str | None = None
    website_url: str | None = None


async def execute(uow: UnitOfWork, actor: Actor, payload: CreateClubInput) -> Club:
    if actor.role not in (Role.ADMIN, Role.CLUB):
        raise Forbidden("Only administrators and club accounts can create clubs")
    club = await uow.clubs.add(
        Club.create(
            name=require_text(payload.name, "name"),
            description=payload.description,
            established_date=payload.established_date,
            location=payload.location,
            contact_email=payload.contact_email,
            website_url=payload.website_url,
        )
    )
    await audit.record(
        uow,
        actor=actor,
        action=AuditAction.CREATE,
        entity_type="Club",
        entity_id=club.id,
        after=club,
    )
    await uow.commit()
    return club
