"""
Shared fixtures: a TestClient whose `core.db` calls hit an in-process fake.

The TestClient is not used as a context manager, so the lifespan hook (which
would open a real asyncpg pool) never runs.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from core import db


class FakeDB:
    """
    Records every SQL call. Results come from `responder(sql, args)` when set,
    otherwise from the queued `one_results` / `all_results`.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.one_results: list[dict[str, Any] | None] = []
        self.all_results: list[list[dict[str, Any]]] = []
        self.responder: Callable[[str, tuple[Any, ...]], Any] | None = None
        self.error: Exception | None = None

    def _record(self, sql: str, args: tuple[Any, ...]) -> None:
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self._record(sql, args)
        if self.responder is not None:
            return self.responder(sql, args)
        return self.one_results.pop(0) if self.one_results else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self._record(sql, args)
        if self.responder is not None:
            return self.responder(sql, args)
        return self.all_results.pop(0) if self.all_results else []

    async def execute(self, sql: str, *args: Any) -> None:
        self._record(sql, args)


@pytest.fixture
def fake_db(monkeypatch: pytest.MonkeyPatch) -> FakeDB:
    fake = FakeDB()
    monkeypatch.setattr(db, "fetch_one", fake.fetch_one)
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    monkeypatch.setattr(db, "execute", fake.execute)
    return fake


@pytest.fixture
def client(fake_db: FakeDB) -> TestClient:
    from main import app

    return TestClient(app, raise_server_exceptions=False)
