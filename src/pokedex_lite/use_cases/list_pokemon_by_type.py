from __future__ import annotations

from dataclasses import dataclass

from pokedex_lite.domain.pokemon import PageResult, Paging, Pokemon
from pokedex_lite.infra.config import CatalogSettings
from pokedex_lite.ports.pokemon_catalog import PokemonCatalog
from pokedex_lite.use_cases.fan_out import fetch_details_in_order
from pokedex_lite.use_cases.get_pokemon_details import GetPokemonDetails, canonical_key


@dataclass(frozen=True, slots=True)
class ListPokemonByTypeRequest:
    type_key: str
    paging: Paging


class ListPokemonByType:
    """
    Listing of one type's members.

    The catalog returns the whole membership unpaginated, so paging is a
    local slice [offset, offset + limit) over the fetched key list.
    """

    def __init__(self, pokemon_catalog: PokemonCatalog, settings: CatalogSettings) -> None:
        self._catalog = pokemon_catalog
        self._settings = settings
        self._get_details = GetPokemonDetails(pokemon_catalog)

    async def execute(self, request: ListPokemonByTypeRequest) -> PageResult[Pokemon] | None:
        """
        Execute the type listing.

        Args:
            request: Type key and paging parameters

        Returns:
            PageResult whose total is the full membership count,
            or None if the type does not exist

        Raises:
            PagingValidationError: If paging parameters are invalid
            UpstreamFetchError: If the membership or any primary fetch fails
        """
        paging = request.paging
        paging.validate(max_limit=self._settings.max_page_size)

        keys = await self._catalog.fetch_type_group(canonical_key(request.type_key))
        if keys is None:
            return None

        page_keys = keys[paging.offset : paging.offset + paging.limit]
        items = await fetch_details_in_order(self._get_details, page_keys)

        return PageResult.build(items=items, total=len(keys), paging=paging)
