"""PokéAPI payload schemas.

Only the fields the service reads are declared; everything else in the
upstream payload is ignored. Validation failures surface as pydantic
ValidationError and are translated by the catalog adapter.
"""

from pydantic import BaseModel, ConfigDict, Field

from pokedex_lite.domain.pokemon import (
    LocalizedText,
    RawAbility,
    RawPokemon,
    RawSpecies,
    RawStat,
)


class NamedResource(BaseModel):
    name: str
    url: str | None = None


class ResourceListPayload(BaseModel):
    count: int
    results: list[NamedResource]


class TypeSlotPayload(BaseModel):
    type: NamedResource


class AbilitySlotPayload(BaseModel):
    ability: NamedResource
    is_hidden: bool = False


class StatPayload(BaseModel):
    base_stat: int
    stat: NamedResource


class ArtworkPayload(BaseModel):
    front_default: str | None = None


class OtherSpritesPayload(BaseModel):
    official_artwork: ArtworkPayload | None = Field(default=None, alias="official-artwork")

    model_config = ConfigDict(populate_by_name=True)


class SpritesPayload(BaseModel):
    front_default: str | None = None
    other: OtherSpritesPayload | None = None


class PokemonPayload(BaseModel):
    id: int
    name: str
    height: int
    weight: int
    types: list[TypeSlotPayload] = Field(default_factory=list)
    abilities: list[AbilitySlotPayload] = Field(default_factory=list)
    stats: list[StatPayload] = Field(default_factory=list)
    sprites: SpritesPayload = Field(default_factory=SpritesPayload)

    def to_domain(self) -> RawPokemon:
        other = self.sprites.other
        artwork = other.official_artwork.front_default if other and other.official_artwork else None
        return RawPokemon(
            id=self.id,
            name=self.name,
            height=self.height,
            weight=self.weight,
            types=[slot.type.name for slot in self.types],
            abilities=[
                RawAbility(name=slot.ability.name, is_hidden=slot.is_hidden)
                for slot in self.abilities
            ],
            stats=[RawStat(name=s.stat.name, base_stat=s.base_stat) for s in self.stats],
            artwork_url=artwork,
            sprite_url=self.sprites.front_default,
        )


class FlavorTextPayload(BaseModel):
    flavor_text: str
    language: NamedResource


class GenusPayload(BaseModel):
    genus: str
    language: NamedResource


class SpeciesPayload(BaseModel):
    flavor_text_entries: list[FlavorTextPayload] = Field(default_factory=list)
    genera: list[GenusPayload] = Field(default_factory=list)
    color: NamedResource | None = None
    capture_rate: int | None = None
    base_happiness: int | None = None

    def to_domain(self) -> RawSpecies:
        return RawSpecies(
            flavor_text_entries=[
                LocalizedText(text=entry.flavor_text, language=entry.language.name)
                for entry in self.flavor_text_entries
            ],
            genera=[
                LocalizedText(text=entry.genus, language=entry.language.name)
                for entry in self.genera
            ],
            color=self.color.name if self.color else None,
            capture_rate=self.capture_rate,
            base_happiness=self.base_happiness,
        )


class TypeMemberPayload(BaseModel):
    pokemon: NamedResource


class TypePayload(BaseModel):
    name: str
    pokemon: list[TypeMemberPayload] = Field(default_factory=list)
