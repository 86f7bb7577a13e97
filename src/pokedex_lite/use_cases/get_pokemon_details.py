"""Get pokemon details use case."""

from __future__ import annotations

import logging

from pokedex_lite.domain.normalizer import to_pokemon
from pokedex_lite.domain.pokemon import Pokemon, RawSpecies
from pokedex_lite.ports.pokemon_catalog import PokemonCatalog

logger = logging.getLogger(__name__)


def canonical_key(name_or_id: str | int) -> str:
    return str(name_or_id).strip().lower()


class GetPokemonDetails:
    """
    Use case for building one display record from two catalog resources.

    Responsibilities:
    - Canonicalize the name/id before any lookup
    - Fetch the primary record; None when it does not exist
    - Fetch the species enrichment best-effort (failures degrade to fallbacks)
    - Delegate field mapping to the normalizer
    """

    def __init__(self, pokemon_catalog: PokemonCatalog) -> None:
        """
        Initialize use case with dependencies.

        Args:
            pokemon_catalog: Port for upstream catalog access
        """
        self._catalog = pokemon_catalog

    async def execute(self, name_or_id: str | int) -> Pokemon | None:
        """
        Execute the get details use case.

        Args:
            name_or_id: Pokemon name or numeric id, in any letter case

        Returns:
            The display record, or None if the catalog has no such pokemon

        Raises:
            UpstreamFetchError: If the primary fetch fails (enrichment failures never raise)
        """
        key = canonical_key(name_or_id)

        raw = await self._catalog.fetch_by_key(key)
        if raw is None:
            return None

        species = await self._fetch_species_or_none(raw.id)
        return to_pokemon(raw, species)

    async def _fetch_species_or_none(self, pokemon_id: int) -> RawSpecies | None:
        try:
            return await self._catalog.fetch_enrichment(pokemon_id)
        except Exception as e:
            logger.warning(
                "Species enrichment unavailable, using fallbacks",
                extra={"pokemon_id": pokemon_id, "error_type": type(e).__name__, "error": str(e)},
            )
            return None
