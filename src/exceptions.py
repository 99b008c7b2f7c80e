"""Application exception hierarchy.

Services raise these; the handlers registered in ``src.main`` turn them into
the standard error envelope using the ``status_code`` each class carries.

    PokedexError (base)         -> 500
    ├── ValidationError         -> 400
    ├── UnauthorizedError       -> 401
    │   └── ForbiddenError      -> 401 (ownership mismatch)
    ├── NotFoundError           -> 404
    ├── ConflictError           -> 409
    ├── RateLimitExceededError  -> 429
    └── InternalServerError     -> 500
"""

from typing import Any

from fastapi import status

from src.messages import ErrorMessages


class PokedexError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: User-facing description, safe to return to the client.
        context: Extra debugging details, logged but never returned.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = ErrorMessages.INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None, context: dict[str, Any] | None = None):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PokedexError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = ErrorMessages.INVALID_INPUT

    def __init__(
        self,
        message: str | None = None,
        errors: dict[str, list[str]] | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.errors = errors or {}


class UnauthorizedError(PokedexError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = ErrorMessages.UNAUTHORIZED


class ForbiddenError(UnauthorizedError):
    """Authenticated, but the resource belongs to someone else.

    Kept at 401 so existing clients, which only distinguish 401, keep working.
    """


class NotFoundError(PokedexError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = ErrorMessages.RESOURCE_NOT_FOUND


class ConflictError(PokedexError):
    status_code = status.HTTP_409_CONFLICT
    default_message = ErrorMessages.CONFLICT


class RateLimitExceededError(PokedexError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_message = ErrorMessages.TOO_MANY_REQUESTS

    def __init__(self, retry_after: int = 60, context: dict[str, Any] | None = None):
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(context=ctx)
        self.retry_after = retry_after


class InternalServerError(PokedexError):
    pass
