"""Ownership checks shared by every user-owned resource."""

import logging
from typing import Protocol, TypeVar

from src.exceptions import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class Owned(Protocol):
    user_id: int


ResourceT = TypeVar("ResourceT", bound=Owned)


def authorize(
    principal_id: int,
    resource: ResourceT | None,
    *,
    resource_id: int,
    not_found_message: str,
    forbidden_message: str,
) -> ResourceT:
    """Return ``resource`` if it exists and belongs to ``principal_id``.

    Raises:
        NotFoundError: the resource does not exist.
        ForbiddenError: the resource is owned by another user.
    """
    if resource is None:
        raise NotFoundError(not_found_message)

    if resource.user_id != principal_id:
        logger.warning(
            f"Unauthorized access attempt: user {principal_id} tried to access "
            f"{type(resource).__name__} {resource_id} owned by user {resource.user_id}"
        )
        raise ForbiddenError(
            forbidden_message,
            context={"resource_id": resource_id, "owner_id": resource.user_id},
        )

    return resource
