"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.api.rate_limit import auth_rate_limiter
from src.database import get_db
from src.messages import SuccessMessages
from src.models.user import User
from src.schemas.auth import (
    LoginResult,
    PasswordChange,
    UserLogin,
    UserProfileResponse,
    UserRegister,
    UserResponse,
)
from src.schemas.common import ApiResponse, MessageResponse
from src.services import auth as auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(auth_rate_limiter)],
)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    user = auth_service.create_user(db, user_data.username, user_data.email, user_data.password)
    logger.info(f"User registered: {user.username} (ID: {user.id})")

    return ApiResponse(
        message=SuccessMessages.REGISTER_SUCCESS,
        data=UserResponse.model_validate(user),
    )


@router.post(
    "/login",
    response_model=ApiResponse[LoginResult],
    dependencies=[Depends(auth_rate_limiter)],
)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    logger.info(f"Login attempt for {credentials.email}")
    token, user = auth_service.login(db, credentials.email, credentials.password)
    logger.info(f"Login succeeded for {user.email} (ID: {user.id})")

    return ApiResponse(
        message=SuccessMessages.LOGIN_SUCCESS,
        data=LoginResult(token=token, user=UserResponse.model_validate(user)),
    )


@router.get("/me", response_model=ApiResponse[UserProfileResponse])
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return ApiResponse(
        message=SuccessMessages.PROFILE_FETCHED,
        data=UserProfileResponse.model_validate(current_user),
    )


@router.put("/password", response_model=MessageResponse)
async def change_password(
    passwords: PasswordChange,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Change the current user's password."""
    auth_service.change_password(db, current_user, passwords.old_password, passwords.new_password)
    logger.info(f"Password changed for {current_user.username}")

    return MessageResponse(message=SuccessMessages.PASSWORD_CHANGED)
