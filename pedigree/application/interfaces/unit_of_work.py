from __future__ import annotations

from typing import Protocol

from pedigree.application.interfaces.repositories.audit_logs import AuditLogRepository
from pedigree.application.interfaces.repositories.breeding_pairs import BreedingPairRepository
from pedigree.application.interfaces.repositories.breeding_programs import (
    BreedingProgramRepository,
)
from pedigree.application.interfaces.repositories.breeding_records import (
    BreedingRecordRepository,
)
from pedigree.application.interfaces.repositories.breeds import BreedRepository
from pedigree.application.interfaces.repositories.clubs import ClubRepository
from pedigree.application.interfaces.repositories.competition_results import (
    CompetitionResultRepository,
)
from pedigree.application.interfaces.repositories.dogs import DogRepository
from pedigree.application.interfaces.repositories.events import EventRepository
from pedigree.application.interfaces.repositories.genetics import GeneticsRepository
from pedigree.application.interfaces.repositories.health_records import HealthRecordRepository
from pedigree.application.interfaces.repositories.litters import LitterRepository
from pedigree.application.interfaces.repositories.owners import OwnerRepository
from pedigree.application.interfaces.repositories.ownerships import OwnershipRepository
from pedigree.application.interfaces.repositories.system_logs import SystemLogRepository
from pedigree.application.interfaces.repositories.users import UserRepository


class UnitOfWork(Protocol):
    dogs: DogRepository
    breeds: BreedRepository
    owners: OwnerRepository
    ownerships: OwnershipRepository
    users: UserRepository
    breeding_programs: BreedingProgramRepository
    breeding_pairs: BreedingPairRepository
    breeding_records: BreedingRecordRepository
    litters: LitterRepository
    health_records: HealthRecordRepository
    competition_results: CompetitionResultRepository
    clubs: ClubRepository
    events: EventRepository
    genetics: GeneticsRepository
    audit_logs: AuditLogRepository
    system_logs: SystemLogRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
