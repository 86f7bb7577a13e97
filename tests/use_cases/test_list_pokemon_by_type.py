"""Test suite for ListPokemonByType use case."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from pokedex_lite.adapters.in_memory_pokemon_catalog import InMemoryPokemonCatalog
from pokedex_lite.domain.errors import PagingValidationError, UpstreamFetchError
from pokedex_lite.domain.pokemon import Paging, RawPokemon
from pokedex_lite.infra.config import CatalogSettings
from pokedex_lite.use_cases.list_pokemon_by_type import (
    ListPokemonByType,
    ListPokemonByTypeRequest,
)


@pytest.mark.asyncio
async def test_unknown_type_returns_none(
    starter_catalog: InMemoryPokemonCatalog, settings: CatalogSettings
) -> None:
    use_case = ListPokemonByType(pokemon_catalog=starter_catalog, settings=settings)

    result = await use_case.execute(
        ListPokemonByTypeRequest(type_key="electric", paging=Paging(page=1, limit=20))
    )

    assert result is None


@pytest.mark.asyncio
async def test_empty_type_returns_empty_page(
    starter_catalog: InMemoryPokemonCatalog, settings: CatalogSettings
) -> None:
    use_case = ListPokemonByType(pokemon_catalog=starter_catalog, settings=settings)

    result = await use_case.execute(ListPokemonByTypeRequest(type_key="shadow", paging=Paging()))

    assert result is not None
    assert result.items == []
    assert result.total == 0
    assert result.has_next_page is False


@pytest.mark.asyncio
async def test_total_is_full_membership_not_page_size(
    starter_catalog: InMemoryPokemonCatalog, settings: CatalogSettings
) -> None:
    use_case = ListPokemonByType(pokemon_catalog=starter_catalog, settings=settings)

    result = await use_case.execute(
        ListPokemonByTypeRequest(type_key="fire", paging=Paging(page=1, limit=2))
    )

    assert result is not None
    assert [p.name for p in result.items] == ["charmander", "charmeleon"]
    assert result.total == 3
    assert result.total_pages == 2
    assert result.has_next_page is True
    assert result.has_prev_page is False


@pytest.mark.asyncio
async def test_second_page_is_local_slice(
    starter_catalog: InMemoryPokemonCatalog, settings: CatalogSettings
) -> None:
    use_case = ListPokemonByType(pokemon_catalog=starter_catalog, settings=settings)

    result = await use_case.execute(
        ListPokemonByTypeRequest(type_key="fire", paging=Paging(page=2, limit=2))
    )

    assert result is not None
    assert [p.name for p in result.items] == ["charizard"]
    assert result.has_next_page is False
    assert result.has_prev_page is True


@pytest.mark.asyncio
async def test_type_key_is_lowercased(settings: CatalogSettings) -> None:
    catalog = AsyncMock()
    catalog.fetch_type_group.return_value = []
    use_case = ListPokemonByType(pokemon_catalog=catalog, settings=settings)

    await use_case.execute(ListPokemonByTypeRequest(type_key="Fire", paging=Paging()))

    catalog.fetch_type_group.assert_awaited_once_with("fire")


@pytest.mark.asyncio
async def test_only_page_members_are_fetched(make_raw_pokemon, settings: CatalogSettings) -> None:
    pokemon = [make_raw_pokemon(i, f"mon-{i}") for i in range(1, 51)]
    catalog = AsyncMock(
        wraps=InMemoryPokemonCatalog(
            pokemon=pokemon, type_groups={"normal": [p.name for p in pokemon]}
        )
    )
    use_case = ListPokemonByType(pokemon_catalog=catalog, settings=settings)

    result = await use_case.execute(
        ListPokemonByTypeRequest(type_key="normal", paging=Paging(page=3, limit=20))
    )

    assert result is not None
    assert [p.name for p in result.items] == [f"mon-{i}" for i in range(41, 51)]
    assert result.total == 50
    assert catalog.fetch_by_key.await_count == 10


@pytest.mark.asyncio
async def test_members_missing_upstream_are_dropped(
    pikachu_raw: RawPokemon, settings: CatalogSettings
) -> None:
    catalog = AsyncMock()
    catalog.fetch_type_group.return_value = ["pikachu", "pikachu-gone"]
    catalog.fetch_enrichment.return_value = None

    async def fetch_by_key(key: str) -> RawPokemon | None:
        return pikachu_raw if key == "pikachu" else None

    catalog.fetch_by_key.side_effect = fetch_by_key
    use_case = ListPokemonByType(pokemon_catalog=catalog, settings=settings)

    result = await use_case.execute(ListPokemonByTypeRequest(type_key="electric", paging=Paging()))

    assert result is not None
    assert [p.name for p in result.items] == ["pikachu"]
    assert result.total == 2


@pytest.mark.asyncio
async def test_membership_failure_propagates(settings: CatalogSettings) -> None:
    catalog = AsyncMock()
    catalog.fetch_type_group.side_effect = UpstreamFetchError("Catalog returned HTTP 503 for /type/fire")
    use_case = ListPokemonByType(pokemon_catalog=catalog, settings=settings)

    with pytest.raises(UpstreamFetchError):
        await use_case.execute(ListPokemonByTypeRequest(type_key="fire", paging=Paging()))


@pytest.mark.asyncio
async def test_invalid_paging_is_rejected_before_fetching(settings: CatalogSettings) -> None:
    catalog = AsyncMock()
    use_case = ListPokemonByType(pokemon_catalog=catalog, settings=settings)

    with pytest.raises(PagingValidationError):
        await use_case.execute(ListPokemonByTypeRequest(type_key="fire", paging=Paging(page=0)))

    catalog.fetch_type_group.assert_not_called()
