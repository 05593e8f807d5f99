from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from pedigree.application.actor import Actor
from pedigree.application.use_cases.litters import (
    create_litter,
    get_litter,
    register_litter_puppies,
)
from pedigree.interfaces.http.deps import get_actor, get_uow
from pedigree.interfaces.http.schemas.dogs import DogResponse
from pedigree.interfaces.http.schemas.litters import (
    LitterCreate,
    LitterDetailResponse,
    LitterResponse,
    PuppiesCreate,
)

router = APIRouter(prefix="/litters", tags=["litters"])


@router.post("", response_model=LitterResponse, status_code=status.HTTP_201_CREATED)
async def create_litter_endpoint(
    payload: LitterCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> LitterResponse:
    litter = await create_litter.execute(
        uow, actor, create_litter.CreateLitterInput(**payload.model_dump())
    )
    return LitterResponse.model_validate(litter)


@router.get("/{litter_id}", response_model=LitterDetailResponse)
async def get_litter_endpoint(
    litter_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> LitterDetailResponse:
    result = await get_litter.execute(uow, litter_id)
    base = LitterResponse.model_validate(result.litter)
    return LitterDetailResponse(
        **base.model_dump(),
        puppies=[DogResponse.model_validate(dog) for dog in result.puppies],
    )


@router.post(
    "/{litter_id}/puppies",
    response_model=list[DogResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register_puppies_endpoint(
    litter_id: UUID,
    payload: PuppiesCreate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> list[DogResponse]:
    puppies = await register_litter_puppies.execute(
        uow,
        actor,
        litter_id,
        [register_litter_puppies.PuppyInput(**item.model_dump()) for item in payload.puppies],
    )
    return [DogResponse.model_validate(dog) for dog in puppies]
