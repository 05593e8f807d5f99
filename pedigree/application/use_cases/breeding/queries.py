from __future__ import annotations

from uuid import UUID

from pedigree.application.errors import NotFound
from pedigree.application.interfaces.unit_of_work import UnitOfWork
from pedigree.domain.models.breeding_pair import BreedingPair
from pedigree.domain.models.breeding_program import BreedingProgram
from pedigree.domain.models.breeding_record import BreedingRecord


async def get_program(uow: UnitOfWork, program_id: UUID) -> BreedingProgram:
    program = await uow.breeding_programs.get(program_id)
    if not program:
        raise NotFound("Breeding program not found")
    return program


async def list_programs(
    uow: UnitOfWork,
    *,
    limit: int,
    offset: int = 0,
    search: str | None = None,
    breeder_id: UUID | None = None,
    breed: str | None = None,
    is_active: bool | None = None,
) -> list[BreedingProgram]:
    return await uow.breeding_programs.list(
        limit=limit,
        offset=offset,
        search=search,
        breeder_id=breeder_id,
        breed=breed,
        is_active=is_active,
    )


async def list_program_pairs(uow: UnitOfWork, program_id: UUID) -> list[BreedingPair]:
    await get_program(uow, program_id)
    return await uow.breeding_pairs.list_for_program(program_id)


async def get_pair(uow: UnitOfWork, pair_id: UUID) -> BreedingPair:
    pair = await uow.breeding_pairs.get(pair_id)
    if not pair:
        raise NotFound("Breeding pair not found")
    return pair


async def get_record(uow: UnitOfWork, record_id: UUID) -> BreedingRecord:
    record = await uow.breeding_records.get(record_id)
    if not record:
        raise NotFound("Breeding record not found")
    return record
