"""Root conftest: shared fixtures for the TheMealDB client tests.

Invariants:
    - No test touches the real network: every client gets an httpx.MockTransport
    - MEALDB_* variables and .env files from the developer machine are ignored

Design Decisions:
    - FakeMealDB records every request so tests can assert on the exact URL
    - Responses are configured per path ("search.php", "list.php", ...)
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from mealdb.core.config import AppSettings

BASE_URL = "https://mealdb.test/api/json/v1/1/"


class FakeMealDB:
    """Minimal stand-in for the remote service, keyed by endpoint path."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, httpx.Response | Exception] = {}

    def reply(self, path: str, payload: Any, *, status_code: int = 200) -> None:
        self._routes[path] = httpx.Response(status_code, text=json.dumps(payload))

    def reply_text(self, path: str, text: str, *, status_code: int = 200) -> None:
        self._routes[path] = httpx.Response(status_code, text=text)

    def fail(self, path: str, exc: Exception) -> None:
        self._routes[path] = exc

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.rsplit("/", 1)[-1]
        route = self._routes.get(path)
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        return route

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("MEALDB_BASE_URL", "MEALDB_HTTP_TIMEOUT_SECONDS", "MEALDB_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, base_url=BASE_URL)


@pytest.fixture
def fake_api() -> FakeMealDB:
    return FakeMealDB()
