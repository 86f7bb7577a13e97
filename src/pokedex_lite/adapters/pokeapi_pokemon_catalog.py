"""PokéAPI implementation of PokemonCatalog."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PayloadValidationError

from pokedex_lite.adapters.pokeapi_schemas import (
    PokemonPayload,
    ResourceListPayload,
    SpeciesPayload,
    TypePayload,
)
from pokedex_lite.domain.errors import UpstreamFetchError
from pokedex_lite.domain.pokemon import KeyPage, RawPokemon, RawSpecies
from pokedex_lite.infra.config import CatalogSettings
from pokedex_lite.ports.pokemon_catalog import PokemonCatalog

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def _path_segment(key: str) -> str | None:
    """Quote ``key`` as a single path segment, or None if it cannot name a resource.

    Dot segments survive quoting and would be resolved against the base URL
    (``/pokemon/..`` is the API root), so they are never sent.
    """
    if key in ("", ".", ".."):
        return None
    return quote(key, safe="")


class PokeApiPokemonCatalog(PokemonCatalog):
    """
    PokéAPI implementation of PokemonCatalog.

    - One httpx.AsyncClient per instance; the timeout comes from settings
    - HTTP 404 is answered with None
    - Any other failure raises UpstreamFetchError, once (no retries)
    - Payloads are validated with pydantic before conversion to domain records
    """

    def __init__(
        self,
        settings: CatalogSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize catalog with settings and an optional HTTP client.

        Args:
            settings: Catalog settings (base URL, timeout)
            client: Pre-built client (tests inject one with a MockTransport).
                    When omitted the catalog owns and closes its own client.
        """
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
        )

    async def __aenter__(self) -> PokeApiPokemonCatalog:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this catalog created it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch_page(self, limit: int, offset: int) -> KeyPage:
        path = "/pokemon"
        data = await self._get_required(path, params={"limit": limit, "offset": offset})
        listing = self._parse(ResourceListPayload, data, path)
        return KeyPage(total=listing.count, keys=[item.name for item in listing.results])

    async def fetch_by_key(self, key: str) -> RawPokemon | None:
        segment = _path_segment(key)
        if segment is None:
            return None
        path = f"/pokemon/{segment}"
        data = await self._get_json(path)
        if data is None:
            return None
        return self._parse(PokemonPayload, data, path).to_domain()

    async def fetch_enrichment(self, pokemon_id: int) -> RawSpecies | None:
        path = f"/pokemon-species/{pokemon_id}"
        data = await self._get_json(path)
        if data is None:
            return None
        return self._parse(SpeciesPayload, data, path).to_domain()

    async def fetch_all_keys(self, cap: int) -> KeyPage:
        return await self.fetch_page(limit=cap, offset=0)

    async def fetch_type_group(self, type_key: str) -> list[str] | None:
        segment = _path_segment(type_key)
        if segment is None:
            return None
        path = f"/type/{segment}"
        data = await self._get_json(path)
        if data is None:
            return None
        group = self._parse(TypePayload, data, path)
        return [member.pokemon.name for member in group.pokemon]

    # =========================================================================
    # HTTP Helpers
    # =========================================================================

    async def _get_required(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Like _get_json, but a 404 on a listing endpoint is a failure."""
        data = await self._get_json(path, params=params)
        if data is None:
            raise UpstreamFetchError(f"Catalog listing {path} returned 404", url=path)
        return data

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any | None:
        """
        GET a catalog resource and decode its JSON body.

        Args:
            path: Path relative to the configured base URL
            params: Optional query parameters

        Returns:
            Decoded JSON, or None if the catalog answered 404

        Raises:
            UpstreamFetchError: On transport errors, timeouts, non-404 error
                                statuses or undecodable bodies
        """
        try:
            response = await self._client.get(path, params=params)
        except httpx.TimeoutException as e:
            logger.warning("Catalog request timed out", extra={"url": path})
            raise UpstreamFetchError(f"Timed out fetching {path}", url=path) from e
        except httpx.HTTPError as e:
            logger.warning("Catalog request failed", extra={"url": path, "error": str(e)})
            raise UpstreamFetchError(f"Failed to fetch {path}: {e}", url=path) from e

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug("Catalog resource not found", extra={"url": path})
            return None

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Catalog returned error status",
                extra={"url": path, "status_code": response.status_code},
            )
            raise UpstreamFetchError(
                f"Catalog returned HTTP {response.status_code} for {path}",
                url=path,
                status_code=response.status_code,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamFetchError(f"Catalog returned invalid JSON for {path}", url=path) from e

    @staticmethod
    def _parse(schema: type[PayloadT], data: Any, path: str) -> PayloadT:
        try:
            return schema.model_validate(data)
        except PayloadValidationError as e:
            logger.warning(
                "Catalog payload did not match schema",
                extra={"url": path, "schema": schema.__name__, "error_count": e.error_count()},
            )
            raise UpstreamFetchError(f"Unexpected payload shape for {path}", url=path) from e
