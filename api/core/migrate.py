"""
Schema migrations (Alembic), applied on startup before the API accepts traffic.

Revisions live in `core/migrations/versions/` and ship with the package.
The lifespan hands Alembic an open async connection; `alembic -c
api/core/alembic.ini upgrade head` works too and builds its own engine.
"""

from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.util import CommandError
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from . import db
from .errors import MigrationError

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parent / "alembic.ini"
MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"

# Transaction-scoped advisory lock taken before upgrading; concurrent starters wait.
ADVISORY_LOCK_KEY = 7_204_118_903


def sqlalchemy_url(url: str | None = None) -> str:
    """
    `DATABASE_URL` rewritten for SQLAlchemy's asyncpg dialect.
    """
    url = url or db.database_url()
    for prefix in ("postgresql://", "postgres://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


def alembic_config() -> Config:
    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    # The app configures logging itself (core/observability.py).
    config.attributes["configure_logger"] = False
    return config


def _upgrade(connection: Connection, config: Config, revision: str) -> None:
    config.attributes["connection"] = connection
    command.upgrade(config, revision)


async def migrate(revision: str = "head") -> None:
    """
    Startup entrypoint. Any failure is raised as `MigrationError`.
    """
    config = alembic_config()
    engine = create_async_engine(sqlalchemy_url(), poolclass=NullPool)
    try:
        async with engine.begin() as connection:
            await connection.run_sync(_upgrade, config, revision)
    except (SQLAlchemyError, CommandError, OSError) as exc:
        raise MigrationError(f"Failed to apply migrations: {exc}") from exc
    finally:
        await engine.dispose()
    logger.info("migrations_complete revision=%s", revision)
