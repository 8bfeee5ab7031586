"""Wrapper de httpx.

Un único builder de `httpx.AsyncClient` para que todas las llamadas usen los
mismos headers y timeout. El parámetro `transport` permite sustituir la red
por un `httpx.MockTransport` en tests.
"""

from __future__ import annotations

import httpx

from mealdb.core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del cliente.

    Sin reintentos ni pool compartido: cada llamada abre y cierra su cliente.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
