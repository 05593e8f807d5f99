from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr

from pedigree.domain.value_objects.event_type import EventType


class ClubCreate(BaseModel):
    name: str
    description: str | None = None
    established_date: date | None = None
    location: str | None = None
    contact_email: EmailStr | None = None
    website_url: str | None = None


class ClubResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
    established_date: date | None = None
    location: str | None = None
    contact_email: str | None = None
    website_url: str | None = None


class EventCreate(BaseModel):
    title: str
    description: str
    event_type: str
    start_date: datetime
    end_date: datetime
    location: str
    organizer: str
    club_id: UUID | None = None
    registration_deadline: datetime | None = None


class EventUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    event_type: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = None
    organizer: str | None = None
    club_id: UUID | None = None
    registration_deadline: datetime | None = None


class PublishRequest(BaseModel):
    is_published: bool = True


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    event_type: EventType
    start_date: datetime
    end_date: datetime
    location: str
    organizer: str
    club_id: UUID | None = None
    registration_deadline: datetime | None = None
    is_published: bool


class EventRegistrationCreate(BaseModel):
    dog_id: UUID


class EventRegistrationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: UUID
    dog_id: UUID
    registration_date: datetime
