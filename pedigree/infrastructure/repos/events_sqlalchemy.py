from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.repositories.events import EventRepository
from pedigree.domain.models.event import Event, EventRegistration
from pedigree.domain.value_objects.event_type import EventType
from pedigree.infrastructure.db.orm.event import EventORM, EventRegistrationORM


class EventsSQLAlchemyRepository(EventRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: EventORM) -> Event:
        return Event(
            id=orm.id,
            title=orm.title,
            description=orm.description,
            event_type=orm.event_type,
            start_date=orm.start_date,
            end_date=orm.end_date,
            location=orm.location,
            organizer=orm.organizer,
            club_id=orm.club_id,
            registration_deadline=orm.registration_deadline,
            is_published=orm.is_published,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    def _registration_to_domain(self, orm: EventRegistrationORM) -> EventRegistration:
        return EventRegistration(
            id=orm.id,
            event_id=orm.event_id,
            dog_id=orm.dog_id,
            registration_date=orm.registration_date,
        )

    async def add(self, event: Event) -> Event:
        orm = EventORM(
            id=event.id,
            title=event.title,
            description=event.description,
            event_type=event.event_type,
            start_date=event.start_date,
            end_date=event.end_date,
            location=event.location,
            organizer=event.organizer,
            club_id=event.club_id,
            registration_deadline=event.registration_deadline,
            is_published=event.is_published,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, event_id: UUID) -> Event | None:
        result = await self.session.execute(select(EventORM).where(EventORM.id == event_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        limit: int,
        offset: int = 0,
        search: str | None = None,
        event_type: EventType | None = None,
        starts_from: datetime | None = None,
        ends_before: datetime | None = None,
        club_id: UUID | None = None,
        published_only: bool = True,
    ) -> list[Event]:
        stmt = select(EventORM)
        if published_only:
            stmt = stmt.where(EventORM.is_published.is_(True))
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(EventORM.title).like(pattern),
                    func.lower(EventORM.description).like(pattern),
                    func.lower(EventORM.location).like(pattern),
                )
            )
        if event_type is not None:
            stmt = stmt.where(EventORM.event_type == event_type)
        if starts_from is not None:
            stmt = stmt.where(EventORM.start_date >= starts_from)
        if ends_before is not None:
            stmt = stmt.where(EventORM.end_date <= ends_before)
        if club_id is not None:
            stmt = stmt.where(EventORM.club_id == club_id)
        stmt = stmt.order_by(EventORM.start_date, EventORM.id).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, event_id: UUID, data: dict) -> Event | None:
        stmt = update(EventORM).where(EventORM.id == event_id).values(**data).returning(EventORM)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def set_published(self, event_id: UUID, is_published: bool) -> Event | None:
        stmt = (
            update(EventORM)
            .where(EventORM.id == event_id)
            .values(is_published=is_published, updated_at=datetime.now(timezone.utc))
            .returning(EventORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def add_registration(self, registration: EventRegistration) -> EventRegistration:
        orm = EventRegistrationORM(
            event_id=registration.event_id,
            dog_id=registration.dog_id,
            registration_date=registration.registration_date,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Dog is already registered for this event",
                details={"dog_id": str(registration.dog_id)},
            ) from exc
        return self._registration_to_domain(orm)

    async def get_registration(self, event_id: UUID, dog_id: UUID) -> EventRegistration | None:
        stmt = select(EventRegistrationORM).where(
            EventRegistrationORM.event_id == event_id, EventRegistrationORM.dog_id == dog_id
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._registration_to_domain(orm) if orm else None

    async def list_registrations(self, event_id: UUID) -> list[EventRegistration]:
        stmt = (
            select(EventRegistrationORM)
            .where(EventRegistrationORM.event_id == event_id)
            .order_by(EventRegistrationORM.id)
        )
        result = await self.session.execute(stmt)
        return [self._registration_to_domain(orm) for orm in result.scalars().all()]
