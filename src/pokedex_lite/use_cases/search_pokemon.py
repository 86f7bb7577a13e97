from __future__ import annotations

import logging
from dataclasses import dataclass

from pokedex_lite.domain.pokemon import SearchResult
from pokedex_lite.infra.config import CatalogSettings
from pokedex_lite.ports.pokemon_catalog import PokemonCatalog
from pokedex_lite.use_cases.fan_out import fetch_details_in_order
from pokedex_lite.use_cases.get_pokemon_details import GetPokemonDetails

logger = logging.getLogger(__name__)

# Upper bound on detail fetches issued by the substring fallback
SEARCH_RESULT_CAP = 20


@dataclass(frozen=True, slots=True)
class SearchPokemonRequest:
    query: str


class SearchPokemon:
    """
    Two-phase pokemon search.

    1. Fast path: treat the query as an exact name/id.
    2. Fallback: case-insensitive, unanchored substring match over the
       catalog key list (bounded by search_scan_limit). Matches keep catalog
       order; only the first SEARCH_RESULT_CAP matches are fetched, but the
       reported total counts every match.
    """

    def __init__(self, pokemon_catalog: PokemonCatalog, settings: CatalogSettings) -> None:
        self._catalog = pokemon_catalog
        self._settings = settings
        self._get_details = GetPokemonDetails(pokemon_catalog)

    async def execute(self, request: SearchPokemonRequest) -> SearchResult:
        """
        Execute the search.

        Args:
            request: Free-text query

        Returns:
            SearchResult (empty with total 0 for a blank query)

        Raises:
            UpstreamFetchError: If a required catalog call fails
        """
        query = request.query.strip()
        if not query:
            return SearchResult(results=[], total=0)

        exact = await self._get_details.execute(query)
        if exact is not None:
            return SearchResult(results=[exact], total=1)

        needle = query.lower()
        key_page = await self._catalog.fetch_all_keys(cap=self._settings.search_scan_limit)
        matches = [key for key in key_page.keys if needle in key.lower()]

        candidates = matches[:SEARCH_RESULT_CAP]
        logger.debug(
            "Substring search fallback",
            extra={"query": needle, "matches": len(matches), "fetched": len(candidates)},
        )
        results = await fetch_details_in_order(self._get_details, candidates)

        return SearchResult(results=results, total=len(matches))
