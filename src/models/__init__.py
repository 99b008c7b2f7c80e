"""SQLAlchemy models."""

from src.models.custom_list import CustomList, CustomListPokemon
from src.models.favorite import Favorite
from src.models.search_history import SearchHistoryEntry
from src.models.user import User

__all__ = [
    "User",
    "Favorite",
    "SearchHistoryEntry",
    "CustomList",
    "CustomListPokemon",
]
