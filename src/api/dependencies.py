"""FastAPI dependencies for authentication, ownership and services."""

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.exceptions import UnauthorizedError
from src.messages import ErrorMessages
from src.models.custom_list import CustomList
from src.models.favorite import Favorite
from src.models.search_history import SearchHistoryEntry
from src.models.user import User
from src.services.auth import decode_access_token, get_user_by_id
from src.services.custom_lists import CustomListsService
from src.services.favorites import FavoritesService
from src.services.ownership import authorize
from src.services.search_history import SearchHistoryService

logger = logging.getLogger(__name__)

# Missing credentials are reported by get_current_principal in the standard envelope
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    """Authenticated caller, as carried by the access token."""

    id: int
    username: str


def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Principal:
    """Get the authenticated caller from the bearer token."""
    if credentials is None:
        raise UnauthorizedError(ErrorMessages.TOKEN_REQUIRED)

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedError(ErrorMessages.TOKEN_INVALID_OR_EXPIRED)

    user_id = payload.get("id")
    username = payload.get("username")
    if not isinstance(user_id, int) or not isinstance(username, str):
        logger.error(f"Valid token with unexpected payload keys: {sorted(payload)}")
        raise UnauthorizedError(ErrorMessages.TOKEN_PAYLOAD_INVALID)

    return Principal(id=user_id, username=username)


def get_current_user(
    principal: Annotated[Principal, Depends(get_current_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the authenticated user's database row."""
    user = get_user_by_id(db, principal.id)
    if user is None:
        raise UnauthorizedError(ErrorMessages.USER_NOT_FOUND)
    return user


def get_favorites_service(
    db: Annotated[Session, Depends(get_db)],
) -> FavoritesService:
    """Get favorites service with dependencies."""
    return FavoritesService(db)


def get_custom_lists_service(
    db: Annotated[Session, Depends(get_db)],
) -> CustomListsService:
    """Get custom lists service with dependencies."""
    return CustomListsService(db)


def get_search_history_service(
    db: Annotated[Session, Depends(get_db)],
) -> SearchHistoryService:
    """Get search history service with dependencies."""
    return SearchHistoryService(db)


def get_owned_favorite(
    favorite_id: Annotated[int, Path(ge=1)],
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[FavoritesService, Depends(get_favorites_service)],
) -> Favorite:
    """Favorite entry from the path, if it belongs to the caller."""
    return authorize(
        principal.id,
        service.find_favorite_by_entry_id(favorite_id),
        resource_id=favorite_id,
        not_found_message=ErrorMessages.FAVORITE_NOT_FOUND,
        forbidden_message=ErrorMessages.FAVORITE_FORBIDDEN,
    )


def get_owned_list(
    list_id: Annotated[int, Path(ge=1)],
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[CustomListsService, Depends(get_custom_lists_service)],
) -> CustomList:
    """Custom list from the path, if it belongs to the caller."""
    return authorize(
        principal.id,
        service.get_list_by_id(list_id),
        resource_id=list_id,
        not_found_message=ErrorMessages.LIST_NOT_FOUND,
        forbidden_message=ErrorMessages.LIST_FORBIDDEN,
    )


def get_owned_history_entry(
    entry_id: Annotated[int, Path(ge=1)],
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[SearchHistoryService, Depends(get_search_history_service)],
) -> SearchHistoryEntry:
    """Search history entry from the path, if it belongs to the caller."""
    return authorize(
        principal.id,
        service.find_history_entry_by_id(entry_id),
        resource_id=entry_id,
        not_found_message=ErrorMessages.HISTORY_ENTRY_NOT_FOUND,
        forbidden_message=ErrorMessages.HISTORY_FORBIDDEN,
    )
