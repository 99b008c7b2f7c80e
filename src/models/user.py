"""User model."""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import CreatedAtMixin


class User(Base, CreatedAtMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(256), unique=True, nullable=False, index=True)
    email = Column(String(256), unique=True, nullable=False, index=True)
    password_hash = Column(Text, nullable=False)

    # Relationships
    favorites = relationship("Favorite", back_populates="user", cascade="all, delete-orphan")
    search_history = relationship(
        "SearchHistoryEntry", back_populates="user", cascade="all, delete-orphan"
    )
    custom_lists = relationship("CustomList", back_populates="user", cascade="all, delete-orphan")
