"""Search history model."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import CreatedAtMixin


class SearchHistoryEntry(Base, CreatedAtMixin):
    """A search term submitted by a user.

    Each (user, term) pair exists once; searching the term again moves its
    created_at forward instead of adding a row.
    """

    __tablename__ = "search_history"
    __table_args__ = (UniqueConstraint("user_id", "search_term", name="search_idx"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    search_term = Column(String(256), nullable=False)

    # Relationships
    user = relationship("User", back_populates="search_history")
