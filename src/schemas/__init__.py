"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    LoginResult,
    PasswordChange,
    UserLogin,
    UserProfileResponse,
    UserRegister,
    UserResponse,
)
from src.schemas.common import ApiResponse, ErrorResponse, MessageResponse
from src.schemas.custom_list import (
    CustomListCreate,
    CustomListDetailResponse,
    CustomListPokemonCreate,
    CustomListPokemonResponse,
    CustomListResponse,
)
from src.schemas.favorite import FavoriteCreate, FavoriteResponse
from src.schemas.search_history import SearchHistoryResponse, SearchTermCreate

__all__ = [
    "ApiResponse",
    "MessageResponse",
    "ErrorResponse",
    "UserRegister",
    "UserLogin",
    "PasswordChange",
    "UserResponse",
    "UserProfileResponse",
    "LoginResult",
    "FavoriteCreate",
    "FavoriteResponse",
    "SearchTermCreate",
    "SearchHistoryResponse",
    "CustomListCreate",
    "CustomListPokemonCreate",
    "CustomListResponse",
    "CustomListDetailResponse",
    "CustomListPokemonResponse",
]
