from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from pedigree.application.actor import Actor
from pedigree.application.lineage import PedigreeNode
from pedigree.application.use_cases.breeding import list_records
from pedigree.application.use_cases.dogs import (
    analyze_linebreeding,
    create_dog,
    delete_dog,
    get_dog,
    get_pedigree,
    link_parents,
    list_dogs,
    review_dog,
    update_dog,
)
from pedigree.application.use_cases.genetics import queries as genetics_queries
from pedigree.application.use_cases.genetics import record_genotype
from pedigree.application.use_cases.health import (
    create_health_record,
    delete_competition_result,
    delete_health_record,
    list_competition_results,
    list_health_records,
    record_competition_result,
    update_competition_result,
    update_health_record,
)
from pedigree.application.use_cases.owners import list_dog_ownerships, transfer_ownership
from pedigree.config.settings import Settings
from pedigree.interfaces.http.deps import (
    get_actor,
    get_app_settings,
    get_optional_actor,
    get_uow,
)
from pedigree.interfaces.http.schemas.breeding import RecordResponse
from pedigree.interfaces.http.schemas.dogs import (
    CommonAncestorResponse,
    DogCreate,
    DogResponse,
    DogsListResponse,
    DogUpdate,
    LinebreedingResponse,
    ParentsUpdate,
    PedigreeNodeResponse,
    ReviewRequest,
)
from pedigree.interfaces.http.schemas.genetics import GenotypeCreate, GenotypeResponse
from pedigree.interfaces.http.schemas.health import (
    CompetitionResultCreate,
    CompetitionResultResponse,
    CompetitionResultUpdate,
    HealthRecordCreate,
    HealthRecordResponse,
    HealthRecordUpdate,
)
from pedigree.interfaces.http.schemas.owners import (
    OwnershipResponse,
    TransferRequest,
    TransferResponse,
)

router = APIRouter(prefix="/dogs", tags=["dogs"])


def _pedigree_to_response(node: PedigreeNode) -> PedigreeNodeResponse:
    return PedigreeNodeResponse(
        id=node.dog.id,
        name=node.dog.name,
        breed=node.dog.breed,
        gender=node.dog.gender,
        registration_number=node.dog.registration_number,
        date_of_birth=node.dog.date_of_birth,
        generation=node.generation,
        sire=_pedigree_to_response(node.sire) if node.sire else None,
        dam=_pedigree_to_response(node.dam) if node.dam else None,
    )


@router.get("", response_model=DogsListResponse)
async def list_dogs_endpoint(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    breed: str | None = Query(None),
    approval_status: str | None = Query(None),
    search: str | None = Query(None, description="Matches name, registration or microchip"),
    viewer: Actor | None = Depends(get_optional_actor),
    uow=Depends(get_uow),
) -> DogsListResponse:
    result = await list_dogs.execute(
        uow,
        viewer,
        limit=limit,
        offset=offset,
        breed=breed,
        approval_status=approval_status,
        search=search,
    )
    return DogsListResponse(
        items=[DogResponse.model_validate(dog) for dog in result.items],
        total=result.total,
        limit=result.limit,
        offset=result.offset,
    )


@router.post("", response_model=DogResponse, status_code=status.HTTP_201_CREATED)
async def create_dog_endpoint(
    payload: DogCreate,
    actor: Actor = Depends(get_actor),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> DogResponse:
    dog = await create_dog.execute(
        uow,
        actor,
        create_dog.CreateDogInput(**payload.model_dump()),
        max_generations=settings.pedigree_max_generations,
    )
    return DogResponse.model_validate(dog)


@router.get("/linebreeding", response_model=LinebreedingResponse)
async def linebreeding_endpoint(
    sire_id: UUID,
    dam_id: UUID,
    generations: int = Query(6, ge=1, le=10),
    _: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> LinebreedingResponse:
    analysis = await analyze_linebreeding.execute(uow, sire_id, dam_id, generations)
    return LinebreedingResponse(
        sire_id=analysis.sire.id,
        dam_id=analysis.dam.id,
        generations=analysis.generations,
        inbreeding_coefficient=analysis.result.coefficient,
        genetic_diversity=analysis.result.genetic_diversity,
        common_ancestors=[
            CommonAncestorResponse(
                dog_id=item.dog_id,
                name=analysis.ancestors[item.dog_id].name
                if item.dog_id in analysis.ancestors
                else None,
                occurrences=item.occurrences,
                contribution=item.contribution,
            )
            for item in analysis.result.common_ancestors
        ],
        recommendations=analysis.recommendations,
    )


@router.get("/{dog_id}", response_model=DogResponse)
async def get_dog_endpoint(
    dog_id: UUID,
    viewer: Actor | None = Depends(get_optional_actor),
    uow=Depends(get_uow),
) -> DogResponse:
    dog = await get_dog.execute(uow, dog_id, viewer)
    return DogResponse.model_validate(dog)


@router.patch("/{dog_id}", response_model=DogResponse)
async def update_dog_endpoint(
    dog_id: UUID,
    payload: DogUpdate,
    actor: Actor = Depends(get_actor),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> DogResponse:
    dog = await update_dog.execute(
        uow,
        actor,
        dog_id,
        update_dog.UpdateDogInput(**payload.model_dump()),
        max_generations=settings.pedigree_max_generations,
    )
    return DogResponse.model_validate(dog)


@router.delete("/{dog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dog_endpoint(
    dog_id: UUID, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> Response:
    await delete_dog.execute(uow, actor, dog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{dog_id}/parents", response_model=DogResponse)
async def link_parents_endpoint(
    dog_id: UUID,
    payload: ParentsUpdate,
    actor: Actor = Depends(get_actor),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> DogResponse:
    dog = await link_parents.execute(
        uow,
        actor,
        dog_id,
        sire_id=payload.sire_id,
        dam_id=payload.dam_id,
        max_generations=settings.pedigree_max_generations,
    )
    return DogResponse.model_validate(dog)


@router.post("/{dog_id}/approve", response_model=DogResponse)
async def approve_dog_endpoint(
    dog_id: UUID,
    payload: ReviewRequest | None = None,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> DogResponse:
    dog = await review_dog.approve(uow, actor, dog_id, payload.notes if payload else None)
    return DogResponse.model_validate(dog)


@router.post("/{dog_id}/decline", response_model=DogResponse)
async def decline_dog_endpoint(
    dog_id: UUID,
    payload: ReviewRequest | None = None,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> DogResponse:
    dog = await review_dog.decline(uow, actor, dog_id, payload.notes if payload else None)
    return DogResponse.model_validate(dog)


@router.get("/{dog_id}/pedigree", response_model=PedigreeNodeResponse)
async def pedigree_endpoint(
    dog_id: UUID,
    generations: int = Query(3, ge=1, le=10),
    viewer: Actor | None = Depends(get_optional_actor),
    uow=Depends(get_uow),
) -> PedigreeNodeResponse:
    tree = await get_pedigree.execute(uow, dog_id, generations, viewer)
    return _pedigree_to_response(tree)


@router.get("/{dog_id}/breeding-records", response_model=list[RecordResponse])
async def dog_breeding_records_endpoint(
    dog_id: UUID,
    role: str = Query("BOTH", description="SIRE, DAM or BOTH"),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    _: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> list[RecordResponse]:
    records = await list_records.execute(uow, dog_id, role=role, limit=limit, offset=offset)
    return [RecordResponse.model_validate(record) for record in records]


@router.get("/{dog_id}/ownerships", response_model=list[OwnershipResponse])
async def dog_ownerships_endpoint(
    dog_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> list[OwnershipResponse]:
    ownerships = await list_dog_ownerships.execute(uow, dog_id)
    return [OwnershipResponse.model_validate(item) for item in ownerships]


@router.post("/{dog_id}/transfer", response_model=TransferResponse)
async def transfer_ownership_endpoint(
    dog_id: UUID,
    payload: TransferRequest,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> TransferResponse:
    result = await transfer_ownership.execute(
        uow,
        actor,
        transfer_ownership.TransferOwnershipInput(dog_id=dog_id, **payload.model_dump()),
    )
    return TransferResponse(
        previous=OwnershipResponse.model_validate(result.previous),
        current=OwnershipResponse.model_validate(result.current),
    )


@router.get("/{dog_id}/health-records", response_model=list[HealthRecordResponse])
async def list_health_records_endpoint(
    dog_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> list[HealthRecordResponse]:
    records = await list_health_records.execute(uow, dog_id)
    return [HealthRecordResponse.model_validate(record) for record in records]


@router.post(
    "/{dog_id}/health-records",
    response_model=HealthRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_health_record_endpoint(
    dog_id: UUID,
    payload: HealthRecordCreate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> HealthRecordResponse:
    record = await create_health_record.execute(
        uow,
        actor,
        create_health_record.CreateHealthRecordInput(dog_id=dog_id, **payload.model_dump()),
    )
    return HealthRecordResponse.model_validate(record)


@router.patch("/{dog_id}/health-records/{record_id}", response_model=HealthRecordResponse)
async def update_health_record_endpoint(
    dog_id: UUID,
    record_id: UUID,
    payload: HealthRecordUpdate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> HealthRecordResponse:
    record = await update_health_record.execute(
        uow,
        actor,
        dog_id,
        record_id,
        update_health_record.UpdateHealthRecordInput(**payload.model_dump()),
    )
    return HealthRecordResponse.model_validate(record)


@router.delete("/{dog_id}/health-records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_health_record_endpoint(
    dog_id: UUID, record_id: UUID, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> Response:
    await delete_health_record.execute(uow, actor, dog_id, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{dog_id}/competition-results", response_model=list[CompetitionResultResponse])
async def list_competition_results_endpoint(
    dog_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> list[CompetitionResultResponse]:
    results = await list_competition_results.execute(uow, dog_id)
    return [CompetitionResultResponse.model_validate(item) for item in results]


@router.post(
    "/{dog_id}/competition-results",
    response_model=CompetitionResultResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_competition_result_endpoint(
    dog_id: UUID,
    payload: CompetitionResultCreate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> CompetitionResultResponse:
    result = await record_competition_result.execute(
        uow,
        actor,
        record_competition_result.CompetitionResultInput(dog_id=dog_id, **payload.model_dump()),
    )
    return CompetitionResultResponse.model_validate(result)


@router.patch(
    "/{dog_id}/competition-results/{result_id}", response_model=CompetitionResultResponse
)
async def update_competition_result_endpoint(
    dog_id: UUID,
    result_id: UUID,
    payload: CompetitionResultUpdate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> CompetitionResultResponse:
    result = await update_competition_result.execute(
        uow,
        actor,
        dog_id,
        result_id,
        update_competition_result.UpdateCompetitionResultInput(**payload.model_dump()),
    )
    return CompetitionResultResponse.model_validate(result)


@router.delete(
    "/{dog_id}/competition-results/{result_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_competition_result_endpoint(
    dog_id: UUID, result_id: UUID, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> Response:
    await delete_competition_result.execute(uow, actor, dog_id, result_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{dog_id}/genotypes", response_model=list[GenotypeResponse])
async def list_genotypes_endpoint(
    dog_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> list[GenotypeResponse]:
    genotypes = await genetics_queries.list_dog_genotypes(uow, dog_id)
    return [GenotypeResponse.model_validate(item) for item in genotypes]


@router.post(
    "/{dog_id}/genotypes", response_model=GenotypeResponse, status_code=status.HTTP_201_CREATED
)
async def record_genotype_endpoint(
    dog_id: UUID,
    payload: GenotypeCreate,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> GenotypeResponse:
    genotype = await record_genotype.execute(
        uow, actor, record_genotype.RecordGenotypeInput(dog_id=dog_id, **payload.model_dump())
    )
    return GenotypeResponse.model_validate(genotype)
