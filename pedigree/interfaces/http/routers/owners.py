from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from pedigree.application.actor import Actor
from pedigree.application.use_cases.owners import (
    create_owner,
    create_ownership,
    get_owner,
    list_owner_dogs,
)
from pedigree.interfaces.http.deps import get_actor, get_uow
from pedigree.interfaces.http.schemas.dogs import DogResponse
from pedigree.interfaces.http.schemas.owners import (
    OwnedDogResponse,
    OwnerCreate,
    OwnerResponse,
    OwnershipCreate,
    OwnershipResponse,
)

router = APIRouter(prefix="", tags=["owners"])


@router.post("/owners", response_model=OwnerResponse, status_code=status.HTTP_201_CREATED)
async def create_owner_endpoint(
    payload: OwnerCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> OwnerResponse:
    owner = await create_owner.execute(
        uow, actor, create_owner.CreateOwnerInput(**payload.model_dump())
    )
    return OwnerResponse.model_validate(owner)


@router.get("/owners/{owner_id}", response_model=OwnerResponse)
async def get_owner_endpoint(
    owner_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> OwnerResponse:
    owner = await get_owner.execute(uow, owner_id)
    return OwnerResponse.model_validate(owner)


@router.get("/owners/{owner_id}/dogs", response_model=list[OwnedDogResponse])
async def list_owner_dogs_endpoint(
    owner_id: UUID,
    include_former: bool = Query(False),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    _: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> list[OwnedDogResponse]:
    items = await list_owner_dogs.execute(
        uow, owner_id, include_former=include_former, limit=limit, offset=offset
    )
    return [
        OwnedDogResponse(
            dog=DogResponse.model_validate(item.dog),
            ownership=OwnershipResponse.model_validate(item.ownership),
        )
        for item in items
    ]


@router.post("/ownerships", response_model=OwnershipResponse, status_code=status.HTTP_201_CREATED)
async def create_ownership_endpoint(
    payload: OwnershipCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> OwnershipResponse:
    ownership = await create_ownership.execute(
        uow, actor, create_ownership.CreateOwnershipInput(**payload.model_dump())
    )
    return OwnershipResponse.model_validate(ownership)
