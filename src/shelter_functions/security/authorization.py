from __future__ import annotations

from shelter_functions.exceptions import PermissionDeniedError, UnauthenticatedError
from shelter_functions.security.context import CallerContext


def authorize(
    caller: CallerContext | None,
    *,
    require_admin: bool = False,
    require_institution: bool = False,
) -> CallerContext:
    """Gate an invocation on identity presence and the two elevated claims.

    Identity is checked first regardless of the flags; the admin and
    institution requirements are independent of each other.
    """
    if caller is None:
        raise UnauthenticatedError("You must be logged in to use this functionality")
    if require_admin and not caller.is_admin:
        raise PermissionDeniedError("You must be an administrator to use this functionality")
    if require_institution and not caller.is_institution:
        raise PermissionDeniedError(
            "You must be authorized by an approved institution to use this feature"
        )
    return caller


__all__ = ["authorize"]
