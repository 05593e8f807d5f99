from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from pedigree.application.actor import Actor
from pedigree.application.use_cases.genetics import (
    create_trait,
    queries,
    record_genetic_analysis,
    set_breed_trait_prevalence,
)
from pedigree.interfaces.http.deps import get_actor, get_uow
from pedigree.interfaces.http.schemas.genetics import (
    AnalysisCreate,
    AnalysisResponse,
    PrevalenceResponse,
    PrevalenceUpsert,
    TraitCreate,
    TraitResponse,
)

router = APIRouter(prefix="", tags=["genetics"])


@router.get("/genetic-traits", response_model=list[TraitResponse])
async def list_traits_endpoint(
    _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> list[TraitResponse]:
    traits = await queries.list_traits(uow)
    return [TraitResponse.model_validate(trait) for trait in traits]


@router.post("/genetic-traits", response_model=TraitResponse, status_code=status.HTTP_201_CREATED)
async def create_trait_endpoint(
    payload: TraitCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> TraitResponse:
    trait = await create_trait.execute(
        uow,
        actor,
        create_trait.CreateTraitInput(
            name=payload.name,
            inheritance_pattern=payload.inheritance_pattern,
            description=payload.description,
            health_implications=payload.health_implications,
            alleles=[create_trait.AlleleInput(**a.model_dump()) for a in payload.alleles],
        ),
    )
    return TraitResponse.model_validate(trait)


@router.get("/genetic-traits/{trait_id}", response_model=TraitResponse)
async def get_trait_endpoint(
    trait_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> TraitResponse:
    trait = await queries.get_trait(uow, trait_id)
    return TraitResponse.model_validate(trait)


@router.put("/breed-prevalences", response_model=PrevalenceResponse)
async def set_prevalence_endpoint(
    payload: PrevalenceUpsert, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> PrevalenceResponse:
    prevalence = await set_breed_trait_prevalence.execute(
        uow, actor, set_breed_trait_prevalence.PrevalenceInput(**payload.model_dump())
    )
    return PrevalenceResponse.model_validate(prevalence)


@router.post(
    "/genetic-analyses", response_model=AnalysisResponse, status_code=status.HTTP_201_CREATED
)
async def record_analysis_endpoint(
    payload: AnalysisCreate, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> AnalysisResponse:
    analysis = await record_genetic_analysis.execute(
        uow,
        actor,
        record_genetic_analysis.RecordAnalysisInput(
            sire_id=payload.sire_id,
            dam_id=payload.dam_id,
            overall_compatibility=payload.overall_compatibility,
            breeding_pair_id=payload.breeding_pair_id,
            recommendations=payload.recommendations,
            predictions=[
                record_genetic_analysis.PredictionInput(**p.model_dump())
                for p in payload.predictions
            ],
        ),
    )
    return AnalysisResponse.model_validate(analysis)


@router.get("/genetic-analyses/{analysis_id}", response_model=AnalysisResponse)
async def get_analysis_endpoint(
    analysis_id: UUID, _: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> AnalysisResponse:
    analysis = await queries.get_analysis(uow, analysis_id)
    return AnalysisResponse.model_validate(analysis)
