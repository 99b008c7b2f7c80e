"""Custom lists API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from src.api.dependencies import (
    Principal,
    get_current_principal,
    get_custom_lists_service,
    get_owned_list,
)
from src.messages import SuccessMessages
from src.models.custom_list import CustomList
from src.schemas.common import ApiResponse, MessageResponse
from src.schemas.custom_list import (
    CustomListCreate,
    CustomListDetailResponse,
    CustomListPokemonCreate,
    CustomListPokemonResponse,
    CustomListResponse,
)
from src.services.custom_lists import CustomListsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/custom-lists", tags=["custom-lists"])


@router.get("", response_model=ApiResponse[list[CustomListResponse]])
async def get_lists(
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[CustomListsService, Depends(get_custom_lists_service)],
):
    """Get all lists of the current user."""
    lists = service.get_lists_by_user_id(principal.id)
    return ApiResponse(
        message=SuccessMessages.LISTS_FETCHED,
        data=[CustomListResponse.model_validate(lst) for lst in lists],
    )


@router.post(
    "", response_model=ApiResponse[CustomListDetailResponse], status_code=status.HTTP_201_CREATED
)
async def create_list(
    list_data: CustomListCreate,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[CustomListsService, Depends(get_custom_lists_service)],
):
    """Create a new list."""
    new_list = service.create_list(principal.id, list_data.name)
    logger.info(f"List {new_list.id} created by user {principal.id}")

    return ApiResponse(
        message=SuccessMessages.LIST_CREATED,
        data=CustomListDetailResponse.model_validate(new_list),
    )


@router.get("/{list_id}", response_model=ApiResponse[CustomListDetailResponse])
async def get_list(
    list_obj: Annotated[CustomList, Depends(get_owned_list)],
    service: Annotated[CustomListsService, Depends(get_custom_lists_service)],
):
    """Get a list with its Pokémon."""
    details = service.get_list_with_pokemons(list_obj.id)
    return ApiResponse(
        message=SuccessMessages.LIST_DETAILS_FETCHED,
        data=CustomListDetailResponse.model_validate(details),
    )


@router.put("/{list_id}", response_model=ApiResponse[CustomListResponse])
async def update_list(
    list_data: CustomListCreate,
    list_obj: Annotated[CustomList, Depends(get_owned_list)],
    service: Annotated[CustomListsService, Depends(get_custom_lists_service)],
):
    """Rename a list."""
    updated = service.update_list(list_obj, list_data.name)
    return ApiResponse(
        message=SuccessMessages.LIST_UPDATED,
        data=CustomListResponse.model_validate(updated),
    )


@router.delete("/{list_id}", response_model=MessageResponse)
async def delete_list(
    list_obj: Annotated[CustomList, Depends(get_owned_list)],
    service: Annotated[CustomListsService, Depends(get_custom_lists_service)],
):
    """Delete a list and everything in it."""
    service.delete_list(list_obj)
    return MessageResponse(message=SuccessMessages.LIST_DELETED)


@router.post(
    "/{list_id}/pokemon",
    response_model=ApiResponse[CustomListPokemonResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_pokemon_to_list(
    pokemon_data: CustomListPokemonCreate,
    list_obj: Annotated[CustomList, Depends(get_owned_list)],
    service: Annotated[CustomListsService, Depends(get_custom_lists_service)],
):
    """Add a Pokémon to a list."""
    entry = service.add_pokemon_to_list(list_obj.id, pokemon_data.pokemon_id)
    return ApiResponse(
        message=SuccessMessages.POKEMON_ADDED_TO_LIST,
        data=CustomListPokemonResponse.model_validate(entry),
    )


@router.delete("/{list_id}/pokemon/{pokemon_id}", response_model=MessageResponse)
async def remove_pokemon_from_list(
    pokemon_id: Annotated[int, Path(ge=1)],
    list_obj: Annotated[CustomList, Depends(get_owned_list)],
    service: Annotated[CustomListsService, Depends(get_custom_lists_service)],
):
    """Remove a Pokémon from a list."""
    service.remove_pokemon_from_list(list_obj.id, pokemon_id)
    return MessageResponse(message=SuccessMessages.POKEMON_REMOVED_FROM_LIST)
