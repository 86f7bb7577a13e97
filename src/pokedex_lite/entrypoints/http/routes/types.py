from fastapi import APIRouter, Depends, Query

from pokedex_lite.domain.errors import NotFoundError
from pokedex_lite.entrypoints.http.dependencies import (
    get_list_pokemon_by_type_use_case,
    get_settings,
)
from pokedex_lite.entrypoints.http.dtos.pokemon import PokemonPageResponseDTO
from pokedex_lite.entrypoints.http.error_responses import ErrorResponse
from pokedex_lite.entrypoints.http.mappers.pokemon_mapper import PokemonMapper
from pokedex_lite.infra.config import CatalogSettings
from pokedex_lite.use_cases.list_pokemon_by_type import (
    ListPokemonByType,
    ListPokemonByTypeRequest,
)


router = APIRouter(tags=["Types"])


@router.get(
    "/types/{type_key}/pokemon",
    response_model=PokemonPageResponseDTO,
    summary="List pokemon of a type",
    description="""
    List the members of one type.

    The catalog returns type membership unpaginated; pages are sliced
    locally and `total` is the full membership count.

    ## Example
    ```
    GET /v1/types/electric/pokemon?page=1&limit=20
    ```
    """,
    responses={
        404: {"description": "Type not found", "model": ErrorResponse},
        422: {"description": "Validation error", "model": ErrorResponse},
        500: {"description": "Upstream catalog failure", "model": ErrorResponse},
    },
)
async def list_pokemon_by_type(
    type_key: str,
    page: int = Query(default=1, ge=1, description="1-based page number"),
    limit: int | None = Query(default=None, ge=1, description="Page size"),
    settings: CatalogSettings = Depends(get_settings),
    use_case: ListPokemonByType = Depends(get_list_pokemon_by_type_use_case),
) -> PokemonPageResponseDTO:
    """List by type endpoint following parse → execute → map → return pattern."""
    paging = PokemonMapper.to_domain_paging(page, limit, settings.default_page_size)

    result = await use_case.execute(ListPokemonByTypeRequest(type_key=type_key, paging=paging))

    if result is None:
        raise NotFoundError(resource="Type", identifier=type_key)

    return PokemonMapper.to_page_response(result)
