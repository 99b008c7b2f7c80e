"""Search history schemas."""

from datetime import datetime

from src.schemas.common import CamelModel, SearchTerm


class SearchTermCreate(CamelModel):
    """Record a search term."""

    search_term: SearchTerm


class SearchHistoryResponse(CamelModel):
    """Search history entry response."""

    id: int
    user_id: int
    search_term: str
    created_at: datetime
