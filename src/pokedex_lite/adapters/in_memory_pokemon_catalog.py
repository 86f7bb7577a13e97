from __future__ import annotations

from pokedex_lite.domain.pokemon import KeyPage, RawPokemon, RawSpecies
from pokedex_lite.ports.pokemon_catalog import PokemonCatalog


class InMemoryPokemonCatalog(PokemonCatalog):
    """
    Canonical contract implementation for tests and local runs.

    - Stores pokemon in insertion order (that order is the catalog order)
    - Looks pokemon up by name or by str(id)
    - Species are keyed by pokemon id; a missing species answers None
    - Type groups are unpaginated key lists; an unknown type answers None
    """

    def __init__(
        self,
        pokemon: list[RawPokemon],
        species: dict[int, RawSpecies] | None = None,
        type_groups: dict[str, list[str]] | None = None,
    ) -> None:
        self._pokemon = pokemon
        self._species = species or {}
        self._type_groups = type_groups or {}

    async def fetch_page(self, limit: int, offset: int) -> KeyPage:
        keys = [p.name for p in self._pokemon[offset : offset + limit]]
        return KeyPage(total=len(self._pokemon), keys=keys)

    async def fetch_by_key(self, key: str) -> RawPokemon | None:
        for pokemon in self._pokemon:
            if key in (pokemon.name, str(pokemon.id)):
                return pokemon
        return None

    async def fetch_enrichment(self, pokemon_id: int) -> RawSpecies | None:
        return self._species.get(pokemon_id)

    async def fetch_all_keys(self, cap: int) -> KeyPage:
        return KeyPage(total=len(self._pokemon), keys=[p.name for p in self._pokemon[:cap]])

    async def fetch_type_group(self, type_key: str) -> list[str] | None:
        group = self._type_groups.get(type_key)
        return list(group) if group is not None else None
