"""
Dependency injection for FastAPI routes.

Key principle: the upstream catalog client is per-request, not cached.
Only stateless singletons (settings) use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import AsyncGenerator

from fastapi import Depends

from pokedex_lite.adapters.pokeapi_pokemon_catalog import PokeApiPokemonCatalog
from pokedex_lite.infra.config import CatalogSettings
from pokedex_lite.ports.pokemon_catalog import PokemonCatalog
from pokedex_lite.use_cases.get_pokemon_details import GetPokemonDetails
from pokedex_lite.use_cases.list_pokemon import ListPokemon
from pokedex_lite.use_cases.list_pokemon_by_type import ListPokemonByType
from pokedex_lite.use_cases.search_pokemon import SearchPokemon


@lru_cache
def get_settings() -> CatalogSettings:
    """Settings are read from the environment once per process."""
    return CatalogSettings.from_env()


async def get_catalog(
    settings: CatalogSettings = Depends(get_settings),
) -> AsyncGenerator[PokemonCatalog, None]:
    """
    Provides a catalog client for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the catalog into the use case factory
    3. Close the underlying HTTP client when the request ends

    Yields:
        PokemonCatalog: PokéAPI-backed catalog (per-request)
    """
    async with PokeApiPokemonCatalog(settings=settings) as catalog:
        yield catalog


def get_pokemon_details_use_case(
    catalog: PokemonCatalog = Depends(get_catalog),
) -> GetPokemonDetails:
    return GetPokemonDetails(pokemon_catalog=catalog)


def get_list_pokemon_use_case(
    catalog: PokemonCatalog = Depends(get_catalog),
    settings: CatalogSettings = Depends(get_settings),
) -> ListPokemon:
    """
    Factory function that returns a configured ListPokemon use case.

    Called per-request, so each request gets a fresh use case bound to its
    own catalog client.
    """
    return ListPokemon(pokemon_catalog=catalog, settings=settings)


def get_search_pokemon_use_case(
    catalog: PokemonCatalog = Depends(get_catalog),
    settings: CatalogSettings = Depends(get_settings),
) -> SearchPokemon:
    return SearchPokemon(pokemon_catalog=catalog, settings=settings)


def get_list_pokemon_by_type_use_case(
    catalog: PokemonCatalog = Depends(get_catalog),
    settings: CatalogSettings = Depends(get_settings),
) -> ListPokemonByType:
    return ListPokemonByType(pokemon_catalog=catalog, settings=settings)
