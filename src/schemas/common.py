"""Shared schema building blocks."""

from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StringConstraints,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from src.messages import ErrorMessages

DataT = TypeVar("DataT")


def with_message(message: str) -> WrapValidator:
    """Replace pydantic's default error text with a fixed user-facing message."""

    def validate(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except PydanticValidationError:
            raise ValueError(message) from None

    return WrapValidator(validate)


PokemonId = Annotated[
    int, Field(ge=1), with_message(ErrorMessages.VALIDATION_POKEMON_ID_REQUIRED)
]
# JSON numbers only: no booleans, no numeric strings
StrictPokemonId = Annotated[
    StrictInt, Field(ge=1), with_message(ErrorMessages.VALIDATION_POKEMON_ID_REQUIRED)
]
ListName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=256),
    with_message(ErrorMessages.VALIDATION_LIST_NAME_REQUIRED),
]
SearchTerm = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=256),
    with_message(ErrorMessages.VALIDATION_SEARCH_TERM_REQUIRED),
]


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[DataT]):
    """Standard response envelope."""

    status: Literal["success", "error"] = "success"
    message: str
    data: DataT | None = None


class MessageResponse(BaseModel):
    """Envelope for responses that carry no data."""

    status: Literal["success", "error"] = "success"
    message: str


class ErrorResponse(BaseModel):
    """Error envelope produced by the exception handlers."""

    status: Literal["error"] = "error"
    message: str
    errors: dict[str, list[str]] | None = None
