from __future__ import annotations

from pokedex_lite.domain.pokemon import PageResult, Paging, Pokemon, SearchResult
from pokedex_lite.entrypoints.http.dtos.pokemon import (
    AbilityResponseDTO,
    PokemonPageResponseDTO,
    PokemonResponseDTO,
    PokemonSearchResponseDTO,
    StatResponseDTO,
)


class PokemonMapper:
    """Maps between REST DTOs and domain models for pokemon queries."""

    @staticmethod
    def to_domain_paging(page: int, limit: int | None, default_limit: int) -> Paging:
        """
        Converts pagination query params to domain paging object.

        Args:
            page: 1-based page number
            limit: Requested page size, or None when the client sent none
            default_limit: Page size to use when the client sent none

        Returns:
            Paging: Domain paging object (validated later by the use case)
        """
        return Paging(page=page, limit=limit if limit is not None else default_limit)

    @staticmethod
    def to_pokemon_response(pokemon: Pokemon) -> PokemonResponseDTO:
        return PokemonResponseDTO(
            id=pokemon.id,
            name=pokemon.name,
            display_name=pokemon.display_name,
            types=list(pokemon.types),
            height=pokemon.height,
            weight=pokemon.weight,
            abilities=[
                AbilityResponseDTO(
                    name=ability.name,
                    display_name=ability.display_name,
                    is_hidden=ability.is_hidden,
                )
                for ability in pokemon.abilities
            ],
            stats=[
                StatResponseDTO(name=stat.name, label=stat.label, value=stat.value)
                for stat in pokemon.stats
            ],
            image_url=pokemon.image_url,
            description=pokemon.description,
            genus=pokemon.genus,
            color=pokemon.color,
            capture_rate=pokemon.capture_rate,
            base_happiness=pokemon.base_happiness,
        )

    @staticmethod
    def to_page_response(result: PageResult[Pokemon]) -> PokemonPageResponseDTO:
        return PokemonPageResponseDTO(
            items=[PokemonMapper.to_pokemon_response(p) for p in result.items],
            total=result.total,
            page=result.page,
            limit=result.limit,
            total_pages=result.total_pages,
            has_next_page=result.has_next_page,
            has_prev_page=result.has_prev_page,
        )

    @staticmethod
    def to_search_response(result: SearchResult) -> PokemonSearchResponseDTO:
        return PokemonSearchResponseDTO(
            results=[PokemonMapper.to_pokemon_response(p) for p in result.results],
            total=result.total,
        )
