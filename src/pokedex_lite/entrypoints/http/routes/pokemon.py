from fastapi import APIRouter, Depends, Query

from pokedex_lite.domain.errors import NotFoundError
from pokedex_lite.entrypoints.http.dependencies import (
    get_list_pokemon_use_case,
    get_pokemon_details_use_case,
    get_search_pokemon_use_case,
    get_settings,
)
from pokedex_lite.entrypoints.http.dtos.pokemon import (
    PokemonPageResponseDTO,
    PokemonResponseDTO,
    PokemonSearchResponseDTO,
)
from pokedex_lite.entrypoints.http.error_responses import ErrorResponse
from pokedex_lite.entrypoints.http.mappers.pokemon_mapper import PokemonMapper
from pokedex_lite.infra.config import CatalogSettings
from pokedex_lite.use_cases.get_pokemon_details import GetPokemonDetails
from pokedex_lite.use_cases.list_pokemon import ListPokemon, ListPokemonRequest
from pokedex_lite.use_cases.search_pokemon import SearchPokemon, SearchPokemonRequest


router = APIRouter(tags=["Pokemon"])


@router.get(
    "/pokemon",
    response_model=PokemonPageResponseDTO,
    summary="List pokemon",
    description="""
    List the catalog in catalog order, one page at a time.

    ## Pagination
    - `page` is 1-based
    - Default limit comes from server settings (20)
    - Max limit comes from server settings (100)
    - `has_next_page` is true when `(page - 1) * limit + limit < total`

    ## Example
    ```
    GET /v1/pokemon?page=2&limit=10
    ```
    """,
    responses={
        422: {"description": "Validation error", "model": ErrorResponse},
        500: {"description": "Upstream catalog failure", "model": ErrorResponse},
    },
)
async def list_pokemon(
    page: int = Query(default=1, ge=1, description="1-based page number"),
    limit: int | None = Query(default=None, ge=1, description="Page size"),
    settings: CatalogSettings = Depends(get_settings),
    use_case: ListPokemon = Depends(get_list_pokemon_use_case),
) -> PokemonPageResponseDTO:
    """List pokemon endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    paging = PokemonMapper.to_domain_paging(page, limit, settings.default_page_size)

    # 2. Execute use case
    result = await use_case.execute(ListPokemonRequest(paging=paging))

    # 3. Map to response
    return PokemonMapper.to_page_response(result)


@router.get(
    "/pokemon/search",
    response_model=PokemonSearchResponseDTO,
    summary="Search pokemon",
    description="""
    Search by exact name/id first, then by case-insensitive substring.

    - A blank query returns no results
    - An exact hit returns exactly one result
    - Substring matches keep catalog order; at most 20 are returned,
      `total` counts every match

    ## Example
    ```
    GET /v1/pokemon/search?q=char
    ```
    """,
    responses={500: {"description": "Upstream catalog failure", "model": ErrorResponse}},
)
async def search_pokemon(
    q: str = Query(default="", description="Name, id or name fragment"),
    use_case: SearchPokemon = Depends(get_search_pokemon_use_case),
) -> PokemonSearchResponseDTO:
    """Search endpoint following parse → execute → map → return pattern."""
    result = await use_case.execute(SearchPokemonRequest(query=q))
    return PokemonMapper.to_search_response(result)


@router.get(
    "/pokemon/{name_or_id}",
    response_model=PokemonResponseDTO,
    summary="Get pokemon details",
    responses={
        404: {"description": "Pokemon not found", "model": ErrorResponse},
        500: {"description": "Upstream catalog failure", "model": ErrorResponse},
    },
)
async def get_pokemon(
    name_or_id: str,
    use_case: GetPokemonDetails = Depends(get_pokemon_details_use_case),
) -> PokemonResponseDTO:
    """Get one pokemon by name or numeric id (case-insensitive)."""
    pokemon = await use_case.execute(name_or_id)

    if pokemon is None:
        raise NotFoundError(resource="Pokemon", identifier=name_or_id)

    return PokemonMapper.to_pokemon_response(pokemon)
