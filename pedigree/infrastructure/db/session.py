from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pedigree.application.errors import ConflictError
from pedigree.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    engine = create_async_engine(database_url, echo=echo, future=True)
    if engine.dialect.name == "sqlite":
        _configure_sqlite(engine)
    return engine


def _configure_sqlite(engine: AsyncEngine) -> None:
    # SQLite ignores foreign keys unless asked, and its deferred BEGIN lets two
    # writers deadlock on lock upgrade; take the write lock when the transaction opens.
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record) -> None:  # noqa: ANN001
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn) -> None:  # noqa: ANN001
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        self.dogs = None
        self.breeds = None
        self.owners = None
        self.ownerships = None
        self.users = None
        self.breeding_programs = None
        self.breeding_pairs = None
        self.breeding_records = None
        self.litters = None
        self.health_records = None
        self.competition_results = None
        self.clubs = None
        self.events = None
        self.genetics = None
        self.audit_logs = None
        self.system_logs = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from pedigree.infrastructure.repos.audit_logs_sqlalchemy import (
            AuditLogsSQLAlchemyRepository,
        )
        from pedigree.infrastructure.repos.breeding_pairs_sqlalchemy import (
            BreedingPairsSQLAlchemyRepository,
        )
        from pedigree.infrastructure.repos.breeding_programs_sqlalchemy import (
            BreedingProgramsSQLAlchemyRepository,
        )
        from pedigree.infrastructure.repos.breeding_records_sqlalchemy import (
            BreedingRecordsSQLAlchemyRepository,
        )
        from pedigree.infrastructure.repos.breeds_sqlalchemy import BreedsSQLAlchemyRepository
        from pedigree.infrastructure.repos.clubs_sqlalchemy import ClubsSQLAlchemyRepository
        from pedigree.infrastructure.repos.competition_results_sqlalchemy import (
            CompetitionResultsSQLAlchemyRepository,
        )
        from pedigree.infrastructure.repos.dogs_sqlalchemy import DogsSQLAlchemyRepository
        from pedigree.infrastructure.repos.events_sqlalchemy import EventsSQLAlchemyRepository
        from pedigree.infrastructure.repos.genetics_sqlalchemy import GeneticsSQLAlchemyRepository
        from pedigree.infrastructure.repos.health_records_sqlalchemy import (
            HealthRecordsSQLAlchemyRepository,
        )
        from pedigree.infrastructure.repos.litters_sqlalchemy import LittersSQLAlchemyRepository
        from pedigree.infrastructure.repos.owners_sqlalchemy import OwnersSQLAlchemyRepository
        from pedigree.infrastructure.repos.ownerships_sqlalchemy import (
            OwnershipsSQLAlchemyRepository,
        )
        from pedigree.infrastructure.repos.system_logs_sqlalchemy import (
            SystemLogsSQLAlchemyRepository,
        )
        from pedigree.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository

        self.dogs = DogsSQLAlchemyRepository(self.session)
        self.breeds = BreedsSQLAlchemyRepository(self.session)
        self.owners = OwnersSQLAlchemyRepository(self.session)
        self.ownerships = OwnershipsSQLAlchemyRepository(self.session)
        self.users = UsersSQLAlchemyRepository(self.session)
        self.breeding_programs = BreedingProgramsSQLAlchemyRepository(self.session)
        self.breeding_pairs = BreedingPairsSQLAlchemyRepository(self.session)
        self.breeding_records = BreedingRecordsSQLAlchemyRepository(self.session)
        self.litters = LittersSQLAlchemyRepository(self.session)
        self.health_records = HealthRecordsSQLAlchemyRepository(self.session)
        self.competition_results = CompetitionResultsSQLAlchemyRepository(self.session)
        self.clubs = ClubsSQLAlchemyRepository(self.session)
        self.events = EventsSQLAlchemyRepository(self.session)
        self.genetics = GeneticsSQLAlchemyRepository(self.session)
        self.audit_logs = AuditLogsSQLAlchemyRepository(self.session)
        self.system_logs = SystemLogsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._reset_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConflictError("Change conflicts with existing data") from exc

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
