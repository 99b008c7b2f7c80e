"""Search history API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import (
    Principal,
    get_current_principal,
    get_owned_history_entry,
    get_search_history_service,
)
from src.messages import SuccessMessages
from src.models.search_history import SearchHistoryEntry
from src.schemas.common import ApiResponse, MessageResponse
from src.schemas.search_history import SearchHistoryResponse, SearchTermCreate
from src.services.search_history import SearchHistoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/search-history", tags=["search-history"])


@router.get("", response_model=ApiResponse[list[SearchHistoryResponse]])
async def get_search_history(
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[SearchHistoryService, Depends(get_search_history_service)],
):
    """Get the current user's recent searches, newest first."""
    history = service.get_history_by_user_id(principal.id)
    return ApiResponse(
        message=SuccessMessages.HISTORY_FETCHED,
        data=[SearchHistoryResponse.model_validate(entry) for entry in history],
    )


@router.post(
    "", response_model=ApiResponse[SearchHistoryResponse], status_code=status.HTTP_201_CREATED
)
async def add_search_term(
    term_data: SearchTermCreate,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[SearchHistoryService, Depends(get_search_history_service)],
):
    """Record a search term (or bump it to the top if already present)."""
    entry = service.add_search_term(principal.id, term_data.search_term)
    logger.info(f"Search term saved for user {principal.id}")

    return ApiResponse(
        message=SuccessMessages.HISTORY_ENTRY_ADDED,
        data=SearchHistoryResponse.model_validate(entry),
    )


@router.delete("/{entry_id}", response_model=MessageResponse)
async def remove_search_term(
    entry: Annotated[SearchHistoryEntry, Depends(get_owned_history_entry)],
    service: Annotated[SearchHistoryService, Depends(get_search_history_service)],
):
    """Delete an entry from the current user's history."""
    entry_id, user_id = entry.id, entry.user_id
    service.remove_search_term(entry_id)
    logger.info(f"Search history entry {entry_id} removed by user {user_id}")

    return MessageResponse(message=SuccessMessages.HISTORY_ENTRY_REMOVED)
