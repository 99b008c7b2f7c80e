"""Favorites API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import (
    Principal,
    get_current_principal,
    get_favorites_service,
    get_owned_favorite,
)
from src.messages import SuccessMessages
from src.models.favorite import Favorite
from src.schemas.common import ApiResponse, MessageResponse
from src.schemas.favorite import FavoriteCreate, FavoriteResponse
from src.services.favorites import FavoritesService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("", response_model=ApiResponse[list[FavoriteResponse]])
async def get_favorites(
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[FavoritesService, Depends(get_favorites_service)],
):
    """Get all favorites of the current user."""
    favorites = service.get_favorites_by_user_id(principal.id)
    return ApiResponse(
        message=SuccessMessages.FAVORITES_FETCHED,
        data=[FavoriteResponse.model_validate(fav) for fav in favorites],
    )


@router.post(
    "", response_model=ApiResponse[FavoriteResponse], status_code=status.HTTP_201_CREATED
)
async def add_favorite(
    favorite_data: FavoriteCreate,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[FavoritesService, Depends(get_favorites_service)],
):
    """Add a Pokémon to the current user's favorites."""
    favorite = service.add_favorite(principal.id, favorite_data.pokemon_id)
    logger.info(f"Favorite {favorite.id} added for user {principal.id}")

    return ApiResponse(
        message=SuccessMessages.FAVORITE_ADDED,
        data=FavoriteResponse.model_validate(favorite),
    )


@router.delete("/{favorite_id}", response_model=MessageResponse)
async def remove_favorite(
    favorite: Annotated[Favorite, Depends(get_owned_favorite)],
    service: Annotated[FavoritesService, Depends(get_favorites_service)],
):
    """Remove a favorite by its entry id."""
    favorite_id, user_id = favorite.id, favorite.user_id
    service.remove_favorite(favorite)
    logger.info(f"Favorite {favorite_id} removed by user {user_id}")

    return MessageResponse(message=SuccessMessages.FAVORITE_REMOVED)
