"""Cliente de TheMealDB (API JSON v1).

Cada operación sigue el mismo recorrido:
URL → GET → cuerpo como texto → JSON → campo esperado → resultado o `MealDBError`.

Notas:
- Una sola petición por llamada, sin reintentos ni caché.
- Los términos de búsqueda por nombre y los filtros se codifican como lo haría
  un codificador de URIs de navegador (se conservan los caracteres reservados).
- La búsqueda por letra y el id se insertan tal cual, sin codificar.
- Un campo ausente, `null` o `""` es "no results found". Una lista vacía NO es
  centinela y se devuelve como éxito.
- Una respuesta no-2xx se trata como fallo de transporte (`raise_for_status`).
- Todo fallo, incluida la codificación del término, sale como `MealDBError`.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx

from mealdb.adapters.http_client import build_async_client
from mealdb.core.config import AppSettings
from mealdb.core.domain.models import ApiPayload, CategoriesPayload, MealsPayload, ResultItem
from mealdb.core.exceptions import MealDBError

logger = logging.getLogger(__name__)

# Reservados que un codificador de URIs completo deja intactos.
_URI_SAFE = ";,/?:@&=+$!*'()#"

_P = TypeVar("_P", bound=ApiPayload)


def encode_term(term: str) -> str:
    """Codifica `term` en UTF-8 `%XX` dejando intactos los caracteres de URI."""

    return quote(term, safe=_URI_SAFE)


def build_url(base_url: str, path: str, query: str | None = None) -> str:
    """Concatena base + endpoint + query string, sin re-codificar nada."""

    url = f"{base_url}{path}"
    if query is not None:
        url += f"?{query}"
    return url


def _expect(payload: ApiPayload, field: str) -> Any:
    value = getattr(payload, field, None)
    if value is None or (isinstance(value, str) and value == ""):
        raise MealDBError.no_results()
    return value


def _require_list(records: Any) -> list[Any]:
    if not isinstance(records, list):
        exc = TypeError(f"expected a list of records, got {type(records).__name__}")
        raise MealDBError.wrap(exc) from exc
    return records


def _first(records: Any) -> ResultItem:
    records = _require_list(records)
    if not records:
        raise MealDBError.no_results()
    return records[0]


def _project(records: Any, key: str) -> list[str]:
    return [item.get(key) if isinstance(item, dict) else None for item in _require_list(records)]


class MealDBClient:
    """Cliente asíncrono sin estado: una corrutina por endpoint.

    `transport` se pasa tal cual a `httpx.AsyncClient` (útil para
    `httpx.MockTransport`).
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def url_for(self, path: str, query: str | None = None) -> str:
        return build_url(self._settings.base_url, path, query)

    async def _fetch(
        self,
        path: str,
        model: type[_P],
        param: str | None = None,
        value: object = None,
        *,
        encode: bool = False,
    ) -> _P:
        # La query se arma dentro del try: un término no codificable también es MealDBError.
        try:
            query = None
            if param is not None:
                query = f"{param}={encode_term(str(value)) if encode else value}"
            url = self.url_for(path, query)
            logger.debug("GET %s", url)
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
            text = response.text
            if not text:
                raise MealDBError.no_results()
            return model.model_validate_json(text)
        # ValueError cubre ValidationError (JSON inválido) y UnicodeError.
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, ValueError) as exc:
            logger.debug("request to %s failed: %s", path, exc)
            raise MealDBError.wrap(exc) from exc

    async def _meals(self, path: str, param: str | None = None, value: object = None, *, encode: bool = False) -> Any:
        payload = await self._fetch(path, MealsPayload, param, value, encode=encode)
        return _expect(payload, "meals")

    async def search_by_name(self, term: str) -> list[ResultItem]:
        """Busca recetas por nombre (`search.php?s=`)."""

        return await self._meals("search.php", "s", term, encode=True)

    async def search_by_letter(self, letter: str) -> list[ResultItem]:
        """Busca recetas por primera letra (`search.php?f=`, sin codificar)."""

        return await self._meals("search.php", "f", letter)

    async def search_by_id(self, meal_id: int) -> ResultItem:
        """Detalle de una receta por id (`lookup.php?i=`). Devuelve el primer registro."""

        return _first(await self._meals("lookup.php", "i", meal_id))

    async def random_meal(self) -> ResultItem:
        return _first(await self._meals("random.php"))

    async def list_categories(self) -> list[ResultItem]:
        payload = await self._fetch("categories.php", CategoriesPayload)
        return _expect(payload, "categories")

    async def filter_by_ingredient(self, term: str) -> list[ResultItem]:
        return await self._meals("filter.php", "i", term, encode=True)

    async def filter_by_area(self, term: str) -> list[ResultItem]:
        return await self._meals("filter.php", "a", term, encode=True)

    async def filter_by_category(self, term: str) -> list[ResultItem]:
        return await self._meals("filter.php", "c", term, encode=True)

    async def category_filter_list(self) -> list[str]:
        """Nombres de categoría (`strCategory`) en el orden del servidor."""

        return _project(await self._meals("list.php", "c", "list"), "strCategory")

    async def ingredient_filter_list(self) -> list[ResultItem]:
        return await self._meals("list.php", "i", "list")

    async def area_filter_list(self) -> list[str]:
        """Nombres de área (`strArea`) en el orden del servidor."""

        return _project(await self._meals("list.php", "a", "list"), "strArea")


# Funciones de módulo: un cliente nuevo por llamada.


def _client(settings: AppSettings | None, transport: httpx.AsyncBaseTransport | None) -> MealDBClient:
    return MealDBClient(settings, transport=transport)


async def search_by_name(
    term: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ResultItem]:
    return await _client(settings, transport).search_by_name(term)


async def search_by_letter(
    letter: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ResultItem]:
    return await _client(settings, transport).search_by_letter(letter)


async def search_by_id(
    meal_id: int,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResultItem:
    return await _client(settings, transport).search_by_id(meal_id)


async def random_meal(
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResultItem:
    return await _client(settings, transport).random_meal()


async def list_categories(
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ResultItem]:
    return await _client(settings, transport).list_categories()


async def filter_by_ingredient(
    term: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ResultItem]:
    return await _client(settings, transport).filter_by_ingredient(term)


async def filter_by_area(
    term: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ResultItem]:
    return await _client(settings, transport).filter_by_area(term)


async def filter_by_category(
    term: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ResultItem]:
    return await _client(settings, transport).filter_by_category(term)


async def category_filter_list(
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[str]:
    return await _client(settings, transport).category_filter_list()


async def ingredient_filter_list(
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ResultItem]:
    return await _client(settings, transport).ingredient_filter_list()


async def area_filter_list(
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[str]:
    return await _client(settings, transport).area_filter_list()
