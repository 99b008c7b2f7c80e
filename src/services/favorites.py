"""Favorites service."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.exceptions import ConflictError, InternalServerError
from src.messages import ErrorMessages
from src.models.favorite import Favorite

logger = logging.getLogger(__name__)


class FavoritesService:
    """Service for a user's favorite Pokémon."""

    def __init__(self, db: Session):
        self.db = db

    def get_favorites_by_user_id(self, user_id: int) -> list[Favorite]:
        """Get all favorites of a user, newest first."""
        logger.info(f"Fetching favorites for user {user_id}")
        return (
            self.db.query(Favorite)
            .filter(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())
            .all()
        )

    def find_favorite(self, user_id: int, pokemon_id: int) -> Favorite | None:
        """Find a user's favorite entry for a given Pokémon."""
        return (
            self.db.query(Favorite)
            .filter(Favorite.user_id == user_id, Favorite.pokemon_id == pokemon_id)
            .first()
        )

    def find_favorite_by_entry_id(self, entry_id: int) -> Favorite | None:
        """Get a favorite entry by primary key."""
        return self.db.query(Favorite).filter(Favorite.id == entry_id).first()

    def add_favorite(self, user_id: int, pokemon_id: int) -> Favorite:
        """Add a Pokémon to the user's favorites.

        Raises:
            ConflictError: the Pokémon is already a favorite.
        """
        if self.find_favorite(user_id, pokemon_id):
            raise ConflictError(ErrorMessages.FAVORITE_ALREADY_EXISTS)

        logger.info(f"Adding favorite (user {user_id}, pokemon {pokemon_id})")
        favorite = Favorite(user_id=user_id, pokemon_id=pokemon_id)
        self.db.add(favorite)
        try:
            self.db.commit()
        except IntegrityError as e:
            # A concurrent request inserted the same pair after our check
            self.db.rollback()
            raise ConflictError(ErrorMessages.FAVORITE_ALREADY_EXISTS) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error adding favorite (user {user_id}, pokemon {pokemon_id}): {e}")
            raise InternalServerError() from e

        self.db.refresh(favorite)
        return favorite

    def remove_favorite(self, favorite: Favorite) -> None:
        """Delete a favorite entry. Ownership is checked by the caller."""
        logger.info(f"Removing favorite entry {favorite.id}")
        try:
            self.db.delete(favorite)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error removing favorite entry {favorite.id}: {e}")
            raise InternalServerError() from e
