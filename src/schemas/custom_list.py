"""Custom list schemas."""

from datetime import datetime

from src.schemas.common import CamelModel, ListName, PokemonId


class CustomListCreate(CamelModel):
    """Create or rename a list."""

    name: ListName


class CustomListPokemonCreate(CamelModel):
    """Add a Pokémon to a list."""

    pokemon_id: PokemonId


class CustomListResponse(CamelModel):
    """List response, without its Pokémon."""

    id: int
    user_id: int
    name: str
    created_at: datetime


class ListPokemonRef(CamelModel):
    """Pokémon id inside a list detail response."""

    pokemon_id: int


class CustomListDetailResponse(CustomListResponse):
    """List response including its Pokémon."""

    pokemons: list[ListPokemonRef] = []


class CustomListPokemonResponse(CamelModel):
    """List membership response."""

    id: int
    list_id: int
    pokemon_id: int
