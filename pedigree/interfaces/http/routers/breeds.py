from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from pedigree.application.actor import Actor
from pedigree.application.use_cases.breeds import (
    create_breed,
    delete_breed,
    queries,
    update_breed,
)
from pedigree.interfaces.http.deps import get_actor, get_uow
from pedigree.interfaces.http.schemas.breeds import BreedCreate, BreedResponse, BreedUpdate

router = APIRouter(prefix="/breeds", tags=["breeds"])


@router.get("", response_model=list[BreedResponse])
async def list_breeds_endpoint(
    search: str | None = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    _: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> list[BreedResponse]:
    breeds = await queries.list_breeds(uow, limit=limit, offset=offset, search=search)
    return [BreedResponse.model_validate(breed) for breed in breeds]


@router.post("", response_model=BreedResponse, status_code=status.HTTP_201_CREATED)
async def create_breed_endpoint(
    payload: BreedCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> BreedResponse:
    breed = await create_breed.execute(
        uow, actor, create_breed.BreedInput(**payload.model_dump())
    )
    return BreedResponse.model_validate(breed)


@router.get("/by-name/{name}", response_model=BreedResponse)
async def get_breed_by_name_endpoint(
    name: str, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> BreedResponse:
    breed = await queries.get_breed_by_name(uow, name)
    return BreedResponse.model_validate(breed)


@router.get("/{breed_id}", response_model=BreedResponse)
async def get_breed_endpoint(
    breed_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> BreedResponse:
    breed = await queries.get_breed(uow, breed_id)
    return BreedResponse.model_validate(breed)


@router.patch("/{breed_id}", response_model=BreedResponse)
async def update_breed_endpoint(
    breed_id: UUID,
    payload: BreedUpdate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> BreedResponse:
    breed = await update_breed.execute(
        uow, actor, breed_id, update_breed.UpdateBreedInput(**payload.model_dump())
    )
    return BreedResponse.model_validate(breed)


@router.delete("/{breed_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_breed_endpoint(
    breed_id: UUID, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> Response:
    await delete_breed.execute(uow, actor, breed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
