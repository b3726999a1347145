"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). The migration CLI does not use the
pool; it opens a single connection with `connect()`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
- a placeholder may be referenced more than once in the same statement.

json/jsonb columns are decoded to Python objects and Python objects are
encoded on the way in (see `_init_connection`).
"""

from __future__ import annotations

import json
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

_pool: asyncpg.Pool | None = None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    return _sanitize_database_url(os.environ.get("DATABASE_URL", "").strip())


def ssl_enabled() -> bool:
    return os.environ.get("DATABASE_SSL", "").strip().lower() in {"1", "true", "yes", "require"}


def connect_options() -> dict[str, Any]:
    """
    Connection arguments for asyncpg.

    DATABASE_URL wins when set; otherwise the discrete DATABASE_HOST/PORT/NAME/
    USER/PASSWORD variables are used.
    """
    options: dict[str, Any] = {"ssl": ssl_enabled()}

    url = database_url()
    if url:
        options["dsn"] = url
        return options

    host = os.environ.get("DATABASE_HOST", "").strip()
    if not host:
        raise RuntimeError("Neither DATABASE_URL nor DATABASE_HOST is set.")

    options.update(
        host=host,
        port=_env_int("DATABASE_PORT", 5432),
        database=os.environ.get("DATABASE_NAME", "").strip() or None,
        user=os.environ.get("DATABASE_USER", "").strip() or None,
        password=os.environ.get("DATABASE_PASSWORD") or None,
    )
    return options


async def _init_connection(conn: asyncpg.Connection) -> None:
    for type_name in ("json", "jsonb"):
        await conn.set_type_codec(
            type_name,
            encoder=json.dumps,
            decoder=json.loads,
            schema="pg_catalog",
        )


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        min_size=_env_int("DATABASE_POOL_MIN", 1),
        max_size=_env_int("DATABASE_POOL_MAX", 10),
        command_timeout=30,
        init=_init_connection,
        **connect_options(),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def connect() -> asyncpg.Connection:
    """
    Open a standalone connection (used by the migration runner).
    """
    conn = await asyncpg.connect(**connect_options())
    await _init_connection(conn)
    return conn


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool().fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def fetch_value(sql: str, *args: Any) -> Any:
    return await pool().fetchval(sql, *args)


async def execute(sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the status tag, e.g. "DELETE 1".
    """
    return await pool().execute(sql, *args)
