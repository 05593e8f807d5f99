from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from pedigree.config.settings import get_settings
from pedigree.infrastructure.db.base import Base
from pedigree.infrastructure.db.orm import (
    audit_log,  # noqa: F401
    breed,  # noqa: F401
    breeding_pair,  # noqa: F401
    breeding_program,  # noqa: F401
    breeding_record,  # noqa: F401
    club,  # noqa: F401
    competition_result,  # noqa: F401
    dog,  # noqa: F401
    event,  # noqa: F401
    genetics,  # noqa: F401
    health_record,  # noqa: F401
    litter,  # noqa: F401
    owner,  # noqa: F401
    ownership,  # noqa: F401
    system_log,  # noqa: F401
    user,  # noqa: F401
)

config = context.config

if config.config_file_name:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def get_url() -> str:
    return get_settings().database_url


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable: AsyncEngine = create_async_engine(get_url(), poolclass=pool.NullPool)

    async def run_async_migrations() -> None:
        async with connectable.connect() as connection:
            await connection.run_sync(do_run_migrations)
        await connectable.dispose()

    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
