"""
Shared fixtures.

The API is exercised through FastAPI's TestClient without running the app
lifespan, so no database pool is created. `fake_db` swaps the `core.db`
query helpers for an in-memory stand-in that records every statement.
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from core import db
from main import app


class FakeDB:
    """
    Records SQL calls and answers them from substring rules.

    A rule's result may be a value, an exception instance (raised), or a
    callable taking the bound args (its return value is used, or raised if it
    is an exception).
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.rules: list[tuple[str, Any]] = []

    def on(self, fragment: str, result: Any) -> None:
        self.rules.append((fragment, result))

    def _answer(self, kind: str, sql: str, args: tuple[Any, ...], default: Any) -> Any:
        self.calls.append((kind, sql, args))
        for fragment, result in self.rules:
            if fragment in sql:
                if callable(result) and not isinstance(result, type):
                    result = result(*args)
                if isinstance(result, BaseException):
                    raise result
                return result
        return default

    def statements(self, fragment: str) -> list[tuple[str, tuple[Any, ...]]]:
        return [(sql, args) for _, sql, args in self.calls if fragment in sql]

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        return self._answer("fetch_all", sql, args, [])

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        return self._answer("fetch_one", sql, args, None)

    async def fetch_value(self, sql: str, *args: Any) -> Any:
        return self._answer("fetch_value", sql, args, None)

    async def execute(self, sql: str, *args: Any) -> str:
        return self._answer("execute", sql, args, "OK")


@pytest.fixture()
def fake_db(monkeypatch: pytest.MonkeyPatch) -> FakeDB:
    fake = FakeDB()
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    monkeypatch.setattr(db, "fetch_one", fake.fetch_one)
    monkeypatch.setattr(db, "fetch_value", fake.fetch_value)
    monkeypatch.setattr(db, "execute", fake.execute)
    return fake


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)
