from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise RuntimeError(f"{name} must be > 0, got {value}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise RuntimeError(f"{name} must be > 0, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class CatalogSettings:
    """
    Explicit configuration for the catalog adapter and the query use cases.

    Built once at startup (see from_env) and passed in at construction;
    nothing below reads process state on its own.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    default_page_size: int = 20
    max_page_size: int = 100
    # Upper bound on keys scanned by the substring search fallback
    search_scan_limit: int = 2000

    @classmethod
    def from_env(cls) -> CatalogSettings:
        """
        Build settings from environment variables, falling back to defaults.

        Raises:
            RuntimeError: If a numeric variable is set but malformed or not positive
        """
        return cls(
            base_url=(os.getenv("POKEAPI_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            timeout_seconds=_env_float("POKEAPI_TIMEOUT_SECONDS", 10.0),
            default_page_size=_env_int("POKEDEX_DEFAULT_PAGE_SIZE", 20),
            max_page_size=_env_int("POKEDEX_MAX_PAGE_SIZE", 100),
            search_scan_limit=_env_int("POKEDEX_SEARCH_SCAN_LIMIT", 2000),
        )
