"""Pure conversions from raw catalog records to display records.

Nothing here performs I/O or raises: missing enrichment data degrades to
fixed fallback values.
"""

from __future__ import annotations

from types import MappingProxyType

from pokedex_lite.domain.pokemon import (
    Ability,
    LocalizedText,
    Pokemon,
    RawPokemon,
    RawSpecies,
    Stat,
)

DISPLAY_LANGUAGE = "en"

NO_DESCRIPTION = "No description available."
UNKNOWN_GENUS = "Unknown"
DEFAULT_COLOR = "gray"

STAT_LABELS = MappingProxyType(
    {
        "hp": "HP",
        "attack": "Attack",
        "defense": "Defense",
        "special-attack": "Sp. Atk",
        "special-defense": "Sp. Def",
        "speed": "Speed",
    }
)


def format_display_name(key: str) -> str:
    """``"mr-mime"`` -> ``"Mr Mime"``. Characters after the first are kept as-is."""
    return " ".join(segment[:1].upper() + segment[1:] for segment in key.split("-"))


def format_stat_label(stat_key: str) -> str:
    """``"special-attack"`` -> ``"Sp. Atk"``. Unknown stats fall back to the display name."""
    return STAT_LABELS.get(stat_key) or format_display_name(stat_key)


def _first_in_language(entries: list[LocalizedText], language: str = DISPLAY_LANGUAGE) -> str | None:
    for entry in entries:
        if entry.language == language:
            return entry.text
    return None


def _description(species: RawSpecies | None) -> str:
    if species is None:
        return NO_DESCRIPTION
    text = _first_in_language(species.flavor_text_entries)
    if text is None:
        return NO_DESCRIPTION
    # Flavor text carries form feeds from the original game cartridges
    return text.replace("\f", " ")


def to_pokemon(raw: RawPokemon, species: RawSpecies | None) -> Pokemon:
    """
    Build the display record for ``raw``, enriched by ``species`` when present.

    Args:
        raw: Primary catalog record
        species: Enrichment record, or None when it could not be fetched

    Returns:
        Pokemon with measurements in metres/kilograms and fallbacks applied
    """
    genus = _first_in_language(species.genera) if species else None

    return Pokemon(
        id=raw.id,
        name=raw.name,
        display_name=format_display_name(raw.name),
        types=list(raw.types),
        height=raw.height / 10,
        weight=raw.weight / 10,
        abilities=[
            Ability(
                name=ability.name,
                display_name=format_display_name(ability.name),
                is_hidden=ability.is_hidden,
            )
            for ability in raw.abilities
        ],
        stats=[
            Stat(name=stat.name, label=format_stat_label(stat.name), value=stat.base_stat)
            for stat in raw.stats
        ],
        image_url=raw.artwork_url or raw.sprite_url or "",
        description=_description(species),
        genus=genus or UNKNOWN_GENUS,
        color=(species.color if species else None) or DEFAULT_COLOR,
        capture_rate=(species.capture_rate if species else None) or 0,
        base_happiness=(species.base_happiness if species else None) or 0,
    )
