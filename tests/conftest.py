"""Shared fixtures: raw catalog records and an in-memory catalog built from them."""

from __future__ import annotations

from typing import Callable

import pytest

from pokedex_lite.adapters.in_memory_pokemon_catalog import InMemoryPokemonCatalog
from pokedex_lite.domain.pokemon import (
    LocalizedText,
    RawAbility,
    RawPokemon,
    RawSpecies,
    RawStat,
)
from pokedex_lite.infra.config import CatalogSettings

MakeRawPokemon = Callable[..., RawPokemon]


@pytest.fixture()
def make_raw_pokemon() -> MakeRawPokemon:
    """Factory for RawPokemon with sensible defaults."""

    def _make(pokemon_id: int, name: str, **overrides: object) -> RawPokemon:
        fields: dict[str, object] = {
            "id": pokemon_id,
            "name": name,
            "height": 10,
            "weight": 100,
            "types": ["normal"],
            "abilities": [RawAbility(name="run-away", is_hidden=False)],
            "stats": [RawStat(name="hp", base_stat=50)],
            "artwork_url": f"https://img.example/artwork/{pokemon_id}.png",
            "sprite_url": f"https://img.example/sprite/{pokemon_id}.png",
        }
        fields.update(overrides)
        return RawPokemon(**fields)  # type: ignore[arg-type]

    return _make


@pytest.fixture()
def pikachu_raw() -> RawPokemon:
    return RawPokemon(
        id=25,
        name="pikachu",
        height=4,
        weight=60,
        types=["electric"],
        abilities=[
            RawAbility(name="static", is_hidden=False),
            RawAbility(name="lightning-rod", is_hidden=True),
        ],
        stats=[
            RawStat(name="hp", base_stat=35),
            RawStat(name="attack", base_stat=55),
            RawStat(name="defense", base_stat=40),
            RawStat(name="special-attack", base_stat=50),
            RawStat(name="special-defense", base_stat=50),
            RawStat(name="speed", base_stat=90),
        ],
        artwork_url="https://img.example/artwork/25.png",
        sprite_url="https://img.example/sprite/25.png",
    )


@pytest.fixture()
def pikachu_species() -> RawSpecies:
    return RawSpecies(
        flavor_text_entries=[
            LocalizedText(text="Quand plusieurs de ces POKéMON se réunissent", language="fr"),
            LocalizedText(text="When several of\fthese POKéMON gather", language="en"),
            LocalizedText(text="A later English entry", language="en"),
        ],
        genera=[
            LocalizedText(text="Pokémon Souris", language="fr"),
            LocalizedText(text="Mouse Pokémon", language="en"),
        ],
        color="yellow",
        capture_rate=190,
        base_happiness=50,
    )


@pytest.fixture()
def settings() -> CatalogSettings:
    return CatalogSettings()


@pytest.fixture()
def starter_catalog(make_raw_pokemon: MakeRawPokemon) -> InMemoryPokemonCatalog:
    """Catalog with the fire starters and bulbasaur, plus fire/grass type groups."""
    pokemon = [
        make_raw_pokemon(1, "bulbasaur", types=["grass", "poison"]),
        make_raw_pokemon(4, "charmander", types=["fire"]),
        make_raw_pokemon(5, "charmeleon", types=["fire"]),
        make_raw_pokemon(6, "charizard", types=["fire", "flying"]),
    ]
    species = {
        4: RawSpecies(color="red", capture_rate=45, base_happiness=50),
    }
    type_groups = {
        "fire": ["charmander", "charmeleon", "charizard"],
        "grass": ["bulbasaur"],
        "shadow": [],
    }
    return InMemoryPokemonCatalog(pokemon=pokemon, species=species, type_groups=type_groups)
