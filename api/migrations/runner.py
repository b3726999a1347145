"""
Migration/seed runner.

Each migration is an ordered list of steps run on one dedicated connection:
- a SQL file name (from `migrations/sql/`), executed verbatim;
- or an async callable taking the connection (data backfills).

No transaction is wrapped around the steps; every file is written to be
re-runnable (`IF NOT EXISTS`, `WHERE NOT EXISTS`, catalog checks).

Usage:
    python -m migrations                    # everything, in registry order
    python -m migrations search_query       # just the named migration(s)
    python -m migrations --list

Exit status is 0 when every selected migration succeeds, 1 otherwise.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Sequence, Union

import asyncpg
from dotenv import load_dotenv

from core import db
from core.logging_conf import configure_logging

from . import backfill

logger = logging.getLogger(__name__)

SQL_DIR = Path(__file__).resolve().parent / "sql"

Step = Union[str, Callable[[asyncpg.Connection], Awaitable[object]]]


@dataclass(frozen=True)
class Migration:
    name: str
    description: str
    steps: tuple[Step, ...]


MIGRATIONS: tuple[Migration, ...] = (
    Migration(
        name="schema",
        description="Create base tables (brands, audiences, competitors, assets, products, campaigns)",
        steps=("schema.sql",),
    ),
    Migration(
        name="ad_inspirations",
        description="Create ad_inspirations table and seed curated ads",
        steps=("add_ad_inspirations.sql", "seed_curated_ads.sql"),
    ),
    Migration(
        name="search_query",
        description="Add search_query column to ad_inspirations table",
        steps=("add_search_query_to_ads.sql",),
    ),
    Migration(
        name="brand_description",
        description="Add description column to brands table",
        steps=("add_brand_description.sql",),
    ),
    Migration(
        name="brand_research",
        description="Create competitor_analyses and brand_intelligence tables",
        steps=("add_brand_research.sql",),
    ),
    Migration(
        name="brand_identifiers",
        description="Add slug/short_id to brands, backfill them, then enforce uniqueness",
        steps=(
            "add_brand_identifiers.sql",
            backfill.backfill_brand_identifiers,
            "brand_identifier_constraints.sql",
        ),
    ),
)


def registry() -> dict[str, Migration]:
    return {m.name: m for m in MIGRATIONS}


def select_migrations(names: Sequence[str] | None) -> list[Migration]:
    """
    Resolve names against the registry, keeping registry order.
    Raises KeyError for unknown names.
    """
    known = registry()
    if not names:
        return list(MIGRATIONS)

    unknown = [n for n in names if n not in known]
    if unknown:
        raise KeyError(", ".join(unknown))

    wanted = set(names)
    return [m for m in MIGRATIONS if m.name in wanted]


def read_sql(filename: str) -> str:
    return (SQL_DIR / filename).read_text(encoding="utf-8")


def _step_label(step: Step) -> str:
    return step if isinstance(step, str) else getattr(step, "__name__", repr(step))


async def run_migration(conn: asyncpg.Connection, migration: Migration) -> bool:
    logger.info("migration_started name=%s description=%s", migration.name, migration.description)
    for step in migration.steps:
        label = _step_label(step)
        try:
            if isinstance(step, str):
                await conn.execute(read_sql(step))
            else:
                await step(conn)
        except Exception:
            logger.exception("migration_failed name=%s step=%s", migration.name, label)
            return False
        logger.info("migration_step_done name=%s step=%s", migration.name, label)

    logger.info("migration_complete name=%s", migration.name)
    return True


async def run(names: Sequence[str] | None = None) -> int:
    """
    Run the selected migrations and return the process exit status.
    """
    try:
        selected = select_migrations(names)
    except KeyError as exc:
        logger.error("unknown_migrations names=%s known=%s", exc.args[0], ", ".join(registry()))
        return 1

    try:
        conn = await db.connect()
    except Exception:
        logger.exception("database_connection_failed")
        return 1

    succeeded: list[str] = []
    failed: list[str] = []
    try:
        now = await conn.fetchval("SELECT NOW()")
        logger.info("database_connected now=%s", now)

        for migration in selected:
            if await run_migration(conn, migration):
                succeeded.append(migration.name)
            else:
                failed.append(migration.name)
    except Exception:
        logger.exception("migration_run_aborted")
        return 1
    finally:
        await conn.close()

    logger.info(
        "migration_summary successful=%s failed=%s total=%s failed_names=%s",
        len(succeeded),
        len(failed),
        len(selected),
        ",".join(failed) or "-",
    )
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python -m migrations", description="Run database migrations and seeds.")
    parser.add_argument("names", nargs="*", help="Migrations to run (default: all, in order).")
    parser.add_argument("--list", action="store_true", help="List known migrations and exit.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # .env.local takes precedence over .env; real environment variables win over both.
    load_dotenv(".env.local")
    load_dotenv(".env")
    configure_logging()

    if args.list:
        for migration in MIGRATIONS:
            print(f"{migration.name:<20} {migration.description}")
        return 0

    return asyncio.run(run(args.names))
