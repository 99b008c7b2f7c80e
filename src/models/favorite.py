"""Favorite model."""

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import CreatedAtMixin


class Favorite(Base, CreatedAtMixin):
    """A Pokémon marked as favorite by a user."""

    __tablename__ = "favorites"
    __table_args__ = (UniqueConstraint("user_id", "pokemon_id", name="favorite_idx"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    pokemon_id = Column(Integer, nullable=False)

    # Relationships
    user = relationship("User", back_populates="favorites")
