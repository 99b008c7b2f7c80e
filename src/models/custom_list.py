"""Custom list models."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import CreatedAtMixin


class CustomList(Base, CreatedAtMixin):
    """User-defined collection of Pokémon (teams, wishlists, etc.)."""

    __tablename__ = "custom_lists"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(256), nullable=False)

    # Relationships
    user = relationship("User", back_populates="custom_lists")
    pokemons = relationship(
        "CustomListPokemon",
        back_populates="list",
        cascade="all, delete-orphan",
        order_by="CustomListPokemon.id",
    )


class CustomListPokemon(Base):
    """Membership of a Pokémon in a custom list."""

    __tablename__ = "custom_list_pokemons"
    __table_args__ = (UniqueConstraint("list_id", "pokemon_id", name="list_pokemon_idx"),)

    id = Column(Integer, primary_key=True, index=True)
    list_id = Column(
        Integer, ForeignKey("custom_lists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    pokemon_id = Column(Integer, nullable=False)

    # Relationships
    list = relationship("CustomList", back_populates="pokemons")
