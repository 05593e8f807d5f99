from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from datetime import date
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from pedigree.config.settings import Settings
from pedigree.domain.models.dog import Dog
from pedigree.domain.models.owner import Owner
from pedigree.domain.models.ownership import Ownership
from pedigree.domain.models.user import User
from pedigree.domain.value_objects.approval_status import ApprovalStatus
from pedigree.domain.value_objects.gender import Gender
from pedigree.domain.value_objects.role import Role
from pedigree.infrastructure.auth.password import PasswordHasher
from pedigree.infrastructure.db.base import Base
from pedigree.infrastructure.db.orm import (  # noqa: F401
    audit_log,
    breed,
    breeding_pair,
    breeding_program,
    breeding_record,
    club,
    competition_result,
    dog,
    event,
    genetics,
    health_record,
    litter,
    owner,
    ownership,
    system_log,
    user,
)
from pedigree.infrastructure.db.session import SQLAlchemyUnitOfWork
from pedigree.interfaces.http.main import create_app

PASSWORD = "correct-horse"


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "jwt_issuer": "pedigree-tests",
            "jwt_audience": "pedigree-api",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def password_hasher() -> PasswordHasher:
    # bcrypt is deliberately slow; tests only need a working scheme
    return PasswordHasher(schemes=("pbkdf2_sha256",))


@pytest.fixture()
def app(test_settings: Settings, password_hasher: PasswordHasher):
    return create_app(settings=test_settings, password_hasher=password_hasher)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    await engine.dispose()


@pytest.fixture()
def uow_factory(app):
    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(app.state.session_factory)

    return factory


@pytest.fixture()
async def users(client, uow_factory, password_hasher) -> dict[str, User]:
    """One active account per role, all sharing ``PASSWORD``."""
    created: dict[str, User] = {}
    async with uow_factory() as uow:
        for role in (Role.ADMIN, Role.OWNER, Role.HANDLER, Role.CLUB, Role.VIEWER):
            key = role.value.lower()
            created[key] = await uow.users.add(
                User.create(
                    email=f"{key}@example.com",
                    hashed_password=password_hasher.hash(PASSWORD),
                    first_name=key.title(),
                    last_name="Tester",
                    role=role,
                )
            )
        await uow.commit()
    return created


@pytest.fixture()
def token_for(app):
    def issue(account: User) -> str:
        return app.state.jwt_service.create_access_token(
            subject=account.id, role=account.role, email=account.email
        )

    return issue


@pytest.fixture()
def headers(users, token_for) -> dict[str, dict[str, str]]:
    return {key: {"Authorization": f"Bearer {token_for(u)}"} for key, u in users.items()}


@pytest.fixture()
def seed_dog(client, uow_factory):
    async def seed(
        name: str,
        gender: Gender,
        *,
        sire_id=None,
        dam_id=None,
        breed: str = "Border Collie",
        born: date = date(2018, 1, 1),
        approved: bool = True,
    ) -> Dog:
        async with uow_factory() as uow:
            dog = Dog.create(
                name=name,
                breed=breed,
                gender=gender,
                date_of_birth=born,
                sire_id=sire_id,
                dam_id=dam_id,
            )
            if approved:
                dog.approval_status = ApprovalStatus.APPROVED
            stored = await uow.dogs.add(dog)
            await uow.commit()
        return stored

    return seed


@pytest.fixture()
def seed_owner(client, uow_factory):
    async def seed(name: str, *, dog_id=None, since: date = date(2020, 1, 1)) -> Owner:
        async with uow_factory() as uow:
            stored = await uow.owners.add(Owner.create(name=name))
            if dog_id is not None:
                await uow.ownerships.add(
                    Ownership.create(owner_id=stored.id, dog_id=dog_id, start_date=since)
                )
            await uow.commit()
        return stored

    return seed
