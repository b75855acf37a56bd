"""
Alembic Migration Environment
==============================

What:  Runs the tag/memo/activity migrations.
How:   The URL is always settings.database_url (alembic.ini carries none),
       so migrations hit the same database the app talks to. SQLite gets
       batch mode, since it cannot ALTER most constraints in place.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy.engine import Connection
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from alembic import context

from app.config import settings
from app.database import Base

# Registers the tables on Base.metadata for --autogenerate
from app.models import activity, memo, tag  # noqa: F401

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _configure(**kwargs) -> None:
    dialect = kwargs.pop("dialect_name")
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        render_as_batch=dialect == "sqlite",
        **kwargs,
    )


def run_offline(url: str) -> None:
    """Print the migration SQL instead of applying it."""
    _configure(
        url=url,
        dialect_name=make_url(url).get_backend_name(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _apply(connection: Connection) -> None:
    _configure(connection=connection, dialect_name=connection.dialect.name)
    with context.begin_transaction():
        context.run_migrations()


async def run_online(url: str) -> None:
    # A one-shot engine; the app's pool settings don't apply here
    engine = create_async_engine(url, poolclass=NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_apply)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_offline(settings.database_url)
else:
    asyncio.run(run_online(settings.database_url))
