from __future__ import annotations

from dataclasses import dataclass

from pokedex_lite.domain.pokemon import PageResult, Paging, Pokemon
from pokedex_lite.infra.config import CatalogSettings
from pokedex_lite.ports.pokemon_catalog import PokemonCatalog
from pokedex_lite.use_cases.fan_out import fetch_details_in_order
from pokedex_lite.use_cases.get_pokemon_details import GetPokemonDetails


@dataclass(frozen=True, slots=True)
class ListPokemonRequest:
    paging: Paging


class ListPokemon:
    """
    Offset-paginated listing of the whole catalog.

    The catalog pages the keys (limit/offset); details for the page are
    fetched concurrently and returned in catalog order.
    """

    def __init__(self, pokemon_catalog: PokemonCatalog, settings: CatalogSettings) -> None:
        self._catalog = pokemon_catalog
        self._settings = settings
        self._get_details = GetPokemonDetails(pokemon_catalog)

    async def execute(self, request: ListPokemonRequest) -> PageResult[Pokemon]:
        """
        Execute the listing.

        Args:
            request: Paging parameters (1-based page)

        Returns:
            PageResult whose total is the catalog-reported count

        Raises:
            PagingValidationError: If paging parameters are invalid
            UpstreamFetchError: If the key page or any primary fetch fails
        """
        paging = request.paging
        paging.validate(max_limit=self._settings.max_page_size)

        key_page = await self._catalog.fetch_page(limit=paging.limit, offset=paging.offset)
        items = await fetch_details_in_order(self._get_details, key_page.keys)

        return PageResult.build(items=items, total=key_page.total, paging=paging)
