from __future__ import annotations

import asyncio

from pokedex_lite.domain.pokemon import Pokemon
from pokedex_lite.use_cases.get_pokemon_details import GetPokemonDetails


async def fetch_details_in_order(get_details: GetPokemonDetails, keys: list[str]) -> list[Pokemon]:
    """
    Fetch details for every key concurrently and wait for the whole batch.

    Output follows the order of ``keys`` regardless of completion order
    (gather fills one result slot per input). Keys that resolve to None are
    dropped. The first UpstreamFetchError aborts the batch: sibling fetches
    still in flight are cancelled and awaited before the error propagates,
    so none of them outlives the caller's catalog client.
    """
    tasks = [asyncio.create_task(get_details.execute(key)) for key in keys]
    try:
        results = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return [pokemon for pokemon in results if pokemon is not None]
