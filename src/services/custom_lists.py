"""Custom lists service."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from src.exceptions import ConflictError, InternalServerError, NotFoundError
from src.messages import ErrorMessages
from src.models.custom_list import CustomList, CustomListPokemon

logger = logging.getLogger(__name__)


class CustomListsService:
    """Service for user-defined Pokémon lists and their members."""

    def __init__(self, db: Session):
        self.db = db

    def get_lists_by_user_id(self, user_id: int) -> list[CustomList]:
        """Get all lists of a user, newest first, without their Pokémon."""
        return (
            self.db.query(CustomList)
            .filter(CustomList.user_id == user_id)
            .order_by(CustomList.created_at.desc(), CustomList.id.desc())
            .all()
        )

    def get_list_by_id(self, list_id: int) -> CustomList | None:
        return self.db.query(CustomList).filter(CustomList.id == list_id).first()

    def get_list_with_pokemons(self, list_id: int) -> CustomList | None:
        return (
            self.db.query(CustomList)
            .options(selectinload(CustomList.pokemons))
            .filter(CustomList.id == list_id)
            .first()
        )

    def create_list(self, user_id: int, name: str) -> CustomList:
        new_list = CustomList(user_id=user_id, name=name)
        self.db.add(new_list)
        self._commit(f"creating list for user {user_id}")
        self.db.refresh(new_list)
        logger.info(f"Created list {new_list.id} for user {user_id}")
        return new_list

    def update_list(self, list_obj: CustomList, name: str) -> CustomList:
        """Rename a list. created_at doubles as the last-modified time."""
        list_obj.name = name
        list_obj.created_at = datetime.now(UTC)
        self._commit(f"updating list {list_obj.id}")
        self.db.refresh(list_obj)
        return list_obj

    def delete_list(self, list_obj: CustomList) -> None:
        """Delete a list together with its Pokémon entries."""
        list_id = list_obj.id
        self.db.delete(list_obj)
        self._commit(f"deleting list {list_id}")
        logger.info(f"Deleted list {list_id}")

    def find_pokemon_in_list(self, list_id: int, pokemon_id: int) -> CustomListPokemon | None:
        return (
            self.db.query(CustomListPokemon)
            .filter(CustomListPokemon.list_id == list_id, CustomListPokemon.pokemon_id == pokemon_id)
            .first()
        )

    def add_pokemon_to_list(self, list_id: int, pokemon_id: int) -> CustomListPokemon:
        """Add a Pokémon to a list.

        Raises:
            ConflictError: the Pokémon is already in the list.
        """
        if self.find_pokemon_in_list(list_id, pokemon_id):
            raise ConflictError(ErrorMessages.POKEMON_ALREADY_IN_LIST)

        entry = CustomListPokemon(list_id=list_id, pokemon_id=pokemon_id)
        self.db.add(entry)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(ErrorMessages.POKEMON_ALREADY_IN_LIST) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error adding pokemon {pokemon_id} to list {list_id}: {e}")
            raise InternalServerError() from e

        self.db.refresh(entry)
        return entry

    def remove_pokemon_from_list(self, list_id: int, pokemon_id: int) -> None:
        """Remove a Pokémon from a list.

        Raises:
            NotFoundError: the Pokémon is not in the list.
        """
        entry = self.find_pokemon_in_list(list_id, pokemon_id)
        if entry is None:
            raise NotFoundError(ErrorMessages.POKEMON_NOT_IN_LIST)

        self.db.delete(entry)
        self._commit(f"removing pokemon {pokemon_id} from list {list_id}")

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error {action}: {e}")
            raise InternalServerError() from e
