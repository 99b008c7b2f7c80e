"""Favorite schemas."""

from datetime import datetime

from src.schemas.common import CamelModel, StrictPokemonId


class FavoriteCreate(CamelModel):
    """Add a Pokémon to favorites."""

    pokemon_id: StrictPokemonId


class FavoriteResponse(CamelModel):
    """Favorite response."""

    id: int
    user_id: int
    pokemon_id: int
    created_at: datetime
