from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pokedex_lite.domain.errors import PagingValidationError

T = TypeVar("T")


# ==============================================================================
# Upstream records (as returned by the catalog, already decoded)
# ==============================================================================


@dataclass(frozen=True, slots=True)
class RawAbility:
    name: str
    is_hidden: bool = False


@dataclass(frozen=True, slots=True)
class RawStat:
    name: str
    base_stat: int


@dataclass(frozen=True, slots=True)
class LocalizedText:
    text: str
    language: str


@dataclass(frozen=True, slots=True)
class RawPokemon:
    """Primary catalog record. Height in decimetres, weight in hectograms."""

    id: int
    name: str
    height: int
    weight: int
    types: list[str] = field(default_factory=list)
    abilities: list[RawAbility] = field(default_factory=list)
    stats: list[RawStat] = field(default_factory=list)
    artwork_url: str | None = None
    sprite_url: str | None = None


@dataclass(frozen=True, slots=True)
class RawSpecies:
    """Optional enrichment record for a pokemon."""

    flavor_text_entries: list[LocalizedText] = field(default_factory=list)
    genera: list[LocalizedText] = field(default_factory=list)
    color: str | None = None
    capture_rate: int | None = None
    base_happiness: int | None = None


@dataclass(frozen=True, slots=True)
class KeyPage:
    total: int
    keys: list[str]


# ==============================================================================
# Display records
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Ability:
    name: str
    display_name: str
    is_hidden: bool


@dataclass(frozen=True, slots=True)
class Stat:
    name: str
    label: str
    value: int


@dataclass(frozen=True)
class Pokemon:
    id: int
    name: str
    display_name: str
    types: list[str]
    height: float  # metres
    weight: float  # kilograms
    abilities: list[Ability]
    stats: list[Stat]
    image_url: str
    description: str
    genus: str
    color: str
    capture_rate: int
    base_happiness: int


# ==============================================================================
# Paging
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    limit: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def validate(self, max_limit: int) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > max_limit:
            raise PagingValidationError(f"limit must be <= {max_limit}")


@dataclass(frozen=True, slots=True)
class PageResult(Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, items: list[T], total: int, paging: Paging) -> PageResult[T]:
        """Assemble a page; paging must already be validated (limit > 0)."""
        return cls(
            items=items,
            total=total,
            page=paging.page,
            limit=paging.limit,
            total_pages=math.ceil(total / paging.limit),
            has_next_page=paging.offset + paging.limit < total,
            has_prev_page=paging.page > 1,
        )


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Search output. Single-shot, never paginated."""

    results: list[Pokemon]
    total: int
