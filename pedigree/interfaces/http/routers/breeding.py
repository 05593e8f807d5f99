from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from pedigree.application.actor import Actor
from pedigree.application.use_cases.breeding import (
    add_pair,
    attach_puppy,
    create_program,
    create_record,
    queries,
    update_pair_status,
    update_record_status,
)
from pedigree.config.settings import Settings
from pedigree.interfaces.http.deps import get_actor, get_app_settings, get_uow
from pedigree.interfaces.http.schemas.breeding import (
    AttachPuppyRequest,
    PairCreate,
    PairResponse,
    PairStatusUpdate,
    ProgramCreate,
    ProgramResponse,
    RecordCreate,
    RecordResponse,
    RecordStatusUpdate,
)

router = APIRouter(prefix="", tags=["breeding"])


@router.post(
    "/breeding-programs", response_model=ProgramResponse, status_code=status.HTTP_201_CREATED
)
async def create_program_endpoint(
    payload: ProgramCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> ProgramResponse:
    program = await create_program.execute(
        uow, actor, create_program.CreateProgramInput(**payload.model_dump())
    )
    return ProgramResponse.model_validate(program)


@router.get("/breeding-programs", response_model=list[ProgramResponse])
async def list_programs_endpoint(
    search: str | None = Query(None),
    breeder_id: UUID | None = Query(None),
    breed: str | None = Query(None),
    is_active: bool | None = Query(None),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    _: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> list[ProgramResponse]:
    programs = await queries.list_programs(
        uow,
        limit=limit,
        offset=offset,
        search=search,
        breeder_id=breeder_id,
        breed=breed,
        is_active=is_active,
    )
    return [ProgramResponse.model_validate(program) for program in programs]


@router.get("/breeding-programs/{program_id}", response_model=ProgramResponse)
async def get_program_endpoint(
    program_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> ProgramResponse:
    program = await queries.get_program(uow, program_id)
    return ProgramResponse.model_validate(program)


@router.get("/breeding-programs/{program_id}/pairs", response_model=list[PairResponse])
async def list_program_pairs_endpoint(
    program_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> list[PairResponse]:
    pairs = await queries.list_program_pairs(uow, program_id)
    return [PairResponse.model_validate(pair) for pair in pairs]


@router.post("/breeding-pairs", response_model=PairResponse, status_code=status.HTTP_201_CREATED)
async def add_pair_endpoint(
    payload: PairCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> PairResponse:
    pair = await add_pair.execute(uow, actor, add_pair.AddPairInput(**payload.model_dump()))
    return PairResponse.model_validate(pair)


@router.get("/breeding-pairs/{pair_id}", response_model=PairResponse)
async def get_pair_endpoint(
    pair_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> PairResponse:
    pair = await queries.get_pair(uow, pair_id)
    return PairResponse.model_validate(pair)


@router.patch("/breeding-pairs/{pair_id}/status", response_model=PairResponse)
async def update_pair_status_endpoint(
    pair_id: UUID,
    payload: PairStatusUpdate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> PairResponse:
    pair = await update_pair_status.execute(uow, actor, pair_id, payload.status, payload.notes)
    return PairResponse.model_validate(pair)


@router.post(
    "/breeding-records", response_model=RecordResponse, status_code=status.HTTP_201_CREATED
)
async def create_record_endpoint(
    payload: RecordCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> RecordResponse:
    record = await create_record.execute(
        uow, actor, create_record.CreateRecordInput(**payload.model_dump())
    )
    return RecordResponse.model_validate(record)


@router.get("/breeding-records/{record_id}", response_model=RecordResponse)
async def get_record_endpoint(
    record_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> RecordResponse:
    record = await queries.get_record(uow, record_id)
    return RecordResponse.model_validate(record)


@router.post("/breeding-records/{record_id}/puppies", response_model=RecordResponse)
async def attach_puppy_endpoint(
    record_id: UUID,
    payload: AttachPuppyRequest,
    actor: Actor = Depends(get_actor),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> RecordResponse:
    record = await attach_puppy.execute(
        uow,
        actor,
        record_id,
        payload.puppy_id,
        max_generations=settings.pedigree_max_generations,
    )
    return RecordResponse.model_validate(record)


@router.patch("/breeding-records/{record_id}/status", response_model=RecordResponse)
async def update_record_status_endpoint(
    record_id: UUID,
    payload: RecordStatusUpdate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> RecordResponse:
    record = await update_record_status.execute(
        uow, actor, record_id, payload.status, payload.litter_size
    )
    return RecordResponse.model_validate(record)
