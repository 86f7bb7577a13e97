from __future__ import annotations

from abc import ABC, abstractmethod

from pokedex_lite.domain.pokemon import KeyPage, RawPokemon, RawSpecies


class PokemonCatalog(ABC):
    """
    Port for upstream catalog access.

    Contract:
        - "Does not exist" is answered with None, never with an exception
        - Any other failure (network, timeout, bad status, undecodable payload)
          raises UpstreamFetchError
        - Keys passed in are already canonical (lowercase); implementations
          do not re-normalize them
        - Implementations keep no state between calls beyond their transport
    """

    @abstractmethod
    async def fetch_page(self, limit: int, offset: int) -> KeyPage:
        """
        Fetch one page of pokemon keys in catalog order.

        Args:
            limit: Maximum number of keys to return
            offset: Number of keys to skip

        Returns:
            KeyPage with the catalog-wide total and the keys of this page
        """
        ...

    @abstractmethod
    async def fetch_by_key(self, key: str) -> RawPokemon | None:
        """Fetch the primary record for a name or numeric id (as a string)."""
        ...

    @abstractmethod
    async def fetch_enrichment(self, pokemon_id: int) -> RawSpecies | None:
        """Fetch the species record used to enrich a pokemon."""
        ...

    @abstractmethod
    async def fetch_all_keys(self, cap: int) -> KeyPage:
        """Fetch up to ``cap`` keys from the start of the catalog in one call."""
        ...

    @abstractmethod
    async def fetch_type_group(self, type_key: str) -> list[str] | None:
        """
        Fetch every pokemon key belonging to a type, unpaginated.

        Returns:
            Keys in catalog order, or None when the type does not exist
            (an existing type with no members returns an empty list)
        """
        ...
