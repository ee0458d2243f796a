"""Apply the Alembic revisions in ``alembic/`` to the configured database.

The helpers borrow a connection from the application's async engine, so the
same SQLite pragmas (foreign-key enforcement) apply to migrations and to
regular queries.  Run from the command line with::

    python -m lue_lue.migrate upgrade head
    python -m lue_lue.migrate downgrade 0001
    python -m lue_lue.migrate current
"""
import argparse
import asyncio
import logging
from typing import Callable, Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine

from lue_lue.config import settings
from lue_lue.errors import MigrationError

log = logging.getLogger(__name__)


def alembic_config(database_url: Optional[str] = None) -> Config:
    """Build an Alembic config pointing at the repository's revisions."""
    cfg = Config()
    cfg.set_main_option("script_location", settings.ALEMBIC_SCRIPT_LOCATION)
    url = database_url or settings.DATABASE_URL
    cfg.set_main_option("sqlalchemy.url", url)
    cfg.attributes["database_url"] = url
    return cfg


def _run_command(connection, cfg: Config, fn: Callable, revision: str) -> None:
    cfg.attributes["connection"] = connection
    fn(cfg, revision)


async def _apply(engine: AsyncEngine, fn: Callable, revision: str, verb: str) -> None:
    cfg = alembic_config(engine.url.render_as_string(hide_password=False))
    try:
        async with engine.begin() as connection:
            await connection.run_sync(_run_command, cfg, fn, revision)
    except DBAPIError as err:
        log.error("%s to %s failed: %s", verb, revision, err.orig)
        raise MigrationError(f"{verb} to {revision} failed: {err.orig}", revision) from err
    log.info("%s to %s complete", verb, revision)


async def upgrade(engine: AsyncEngine, revision: str = "head") -> None:
    await _apply(engine, command.upgrade, revision, "Upgrade")


async def downgrade(engine: AsyncEngine, revision: str) -> None:
    await _apply(engine, command.downgrade, revision, "Downgrade")


async def current_revision(engine: AsyncEngine) -> Optional[str]:
    """Return the revision recorded in ``alembic_version``, or None if unmigrated."""
    async with engine.connect() as connection:
        return await connection.run_sync(
            lambda conn: MigrationContext.configure(conn).get_current_revision()
        )


async def _main(args: argparse.Namespace) -> None:
    from lue_lue.database import build_engine

    engine = build_engine(args.database_url or settings.DATABASE_URL, settings.SQLITE_FOREIGN_KEYS)
    try:
        if args.action == "upgrade":
            await upgrade(engine, args.revision or "head")
        elif args.action == "downgrade":
            if not args.revision:
                raise SystemExit("downgrade needs a target revision")
            await downgrade(engine, args.revision)
        print(await current_revision(engine) or "<base>")
    finally:
        await engine.dispose()


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="lue_lue.migrate", description=__doc__.splitlines()[0])
    parser.add_argument("action", choices=["upgrade", "downgrade", "current"])
    parser.add_argument("revision", nargs="?")
    parser.add_argument("--database-url", default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)-5.5s [%(name)s] %(message)s")
    try:
        asyncio.run(_main(args))
    except MigrationError as err:
        raise SystemExit(str(err)) from err


if __name__ == "__main__":
    main()
