"""
Alembic Migration Environment
==============================

What:  Runs migrations with the application's async engine settings.
How:   Imports the ORM models so Base.metadata is complete, takes the
       database URL from app.config, and bridges the async engine into
       Alembic's synchronous migration context. Autogenerate compares column
       types; SQLite databases (local development) migrate in batch mode.
Who:   The `alembic` CLI (upgrade, downgrade, revision).
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from app.config import settings
from app.database import Base

# Registers users and posts with Base.metadata for --autogenerate
import app.models  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# Single source of truth for the URL: app settings, not alembic.ini.
# The ini parser interpolates "%", which percent-encoded passwords contain.
config.set_main_option("sqlalchemy.url", settings.database_url.replace("%", "%%"))


def _configure_options(dialect_name: str) -> dict:
    return {
        "target_metadata": target_metadata,
        # String(50) -> String(255) and similar show up in --autogenerate
        "compare_type": True,
        # SQLite cannot ALTER constraints in place; rebuild the table instead
        "render_as_batch": dialect_name == "sqlite",
    }


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting to the database."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(make_url(url).get_backend_name()),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(
        connection=connection,
        **_configure_options(connection.dialect.name),
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Connect with a throwaway async engine and apply pending migrations."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
