from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from pedigree.application.actor import Actor
from pedigree.application.use_cases.events import (
    create_club,
    create_event,
    publish_event,
    queries,
    register_dog_for_event,
    update_event,
)
from pedigree.interfaces.http.deps import get_actor, get_uow
from pedigree.interfaces.http.schemas.events import (
    ClubCreate,
    ClubResponse,
    EventCreate,
    EventRegistrationCreate,
    EventRegistrationResponse,
    EventResponse,
    EventUpdate,
    PublishRequest,
)

router = APIRouter(prefix="", tags=["events"])


@router.post("/clubs", response_model=ClubResponse, status_code=status.HTTP_201_CREATED)
async def create_club_endpoint(
    payload: ClubCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> ClubResponse:
    club = await create_club.execute(
        uow, actor, create_club.CreateClubInput(**payload.model_dump())
    )
    return ClubResponse.model_validate(club)


@router.get("/events", response_model=list[EventResponse])
async def list_events_endpoint(
    search: str | None = Query(None),
    event_type: str | None = Query(None),
    starts_from: datetime | None = Query(None),
    ends_before: datetime | None = Query(None),
    club_id: UUID | None = Query(None),
    include_unpublished: bool = Query(False),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> list[EventResponse]:
    events = await queries.list_events(
        uow,
        actor,
        limit=limit,
        offset=offset,
        search=search,
        event_type=event_type,
        starts_from=starts_from,
        ends_before=ends_before,
        club_id=club_id,
        include_unpublished=include_unpublished,
    )
    return [EventResponse.model_validate(event) for event in events]


@router.post("/events", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    payload: EventCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> EventResponse:
    event = await create_event.execute(
        uow, actor, create_event.CreateEventInput(**payload.model_dump())
    )
    return EventResponse.model_validate(event)


@router.get("/events/{event_id}", response_model=EventResponse)
async def get_event_endpoint(
    event_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> EventResponse:
    event = await queries.get_event(uow, event_id)
    return EventResponse.model_validate(event)


@router.patch("/events/{event_id}", response_model=EventResponse)
async def update_event_endpoint(
    event_id: UUID,
    payload: EventUpdate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> EventResponse:
    event = await update_event.execute(
        uow, actor, event_id, update_event.UpdateEventInput(**payload.model_dump())
    )
    return EventResponse.model_validate(event)


@router.post("/events/{event_id}/publish", response_model=EventResponse)
async def publish_event_endpoint(
    event_id: UUID,
    payload: PublishRequest | None = None,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> EventResponse:
    is_published = payload.is_published if payload else True
    event = await publish_event.execute(uow, actor, event_id, is_published)
    return EventResponse.model_validate(event)


@router.post(
    "/events/{event_id}/registrations",
    response_model=EventRegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_dog_endpoint(
    event_id: UUID,
    payload: EventRegistrationCreate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> EventRegistrationResponse:
    registration = await register_dog_for_event.execute(uow, actor, event_id, payload.dog_id)
    return EventRegistrationResponse.model_validate(registration)


@router.get("/events/{event_id}/registrations", response_model=list[EventRegistrationResponse])
async def list_registrations_endpoint(
    event_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> list[EventRegistrationResponse]:
    registrations = await queries.list_registrations(uow, event_id)
    return [EventRegistrationResponse.model_validate(item) for item in registrations]
