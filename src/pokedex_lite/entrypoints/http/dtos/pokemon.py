from pydantic import BaseModel, ConfigDict, Field


class AbilityResponseDTO(BaseModel):
    name: str
    display_name: str
    is_hidden: bool


class StatResponseDTO(BaseModel):
    name: str
    label: str
    value: int


class PokemonResponseDTO(BaseModel):
    id: int
    name: str
    display_name: str
    types: list[str]
    height: float = Field(description="Height in metres")
    weight: float = Field(description="Weight in kilograms")
    abilities: list[AbilityResponseDTO]
    stats: list[StatResponseDTO]
    image_url: str
    description: str
    genus: str
    color: str
    capture_rate: int
    base_happiness: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 25,
                "name": "pikachu",
                "display_name": "Pikachu",
                "types": ["electric"],
                "height": 0.4,
                "weight": 6.0,
                "abilities": [
                    {"name": "static", "display_name": "Static", "is_hidden": False},
                    {"name": "lightning-rod", "display_name": "Lightning Rod", "is_hidden": True},
                ],
                "stats": [{"name": "special-attack", "label": "Sp. Atk", "value": 50}],
                "image_url": "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/other/official-artwork/25.png",
                "description": "When several of these POKéMON gather, their electricity could build and cause lightning storms.",
                "genus": "Mouse Pokémon",
                "color": "yellow",
                "capture_rate": 190,
                "base_happiness": 50,
            }
        }
    )


class PokemonPageResponseDTO(BaseModel):
    items: list[PokemonResponseDTO]
    total: int
    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class PokemonSearchResponseDTO(BaseModel):
    results: list[PokemonResponseDTO]
    total: int
