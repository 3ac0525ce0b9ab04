from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

from shelter_functions.exceptions import ShelterFunctionsError


class IdentityError(ShelterFunctionsError):
    pass


class UserNotFoundError(IdentityError):
    pass


@dataclass(frozen=True)
class UserRecord:
    uid: str
    email: str | None = None
    custom_claims: Mapping[str, Any] = field(default_factory=dict)


@runtime_checkable
class IdentityProvider(Protocol):
    async def get_user(self, uid: str) -> UserRecord: ...

    async def get_user_by_email(self, email: str) -> UserRecord: ...

    async def ensure_user(self, uid: str, *, email: str | None = None) -> UserRecord:
        """Return the record for ``uid``, creating it (no claims) when absent.

        A known email is never overwritten; a missing one is filled in.
        """
        ...

    async def set_claims(self, uid: str, claims: Mapping[str, Any]) -> None:
        """Replace the user's custom claims with ``claims``."""
        ...


__all__ = ["IdentityProvider", "IdentityError", "UserNotFoundError", "UserRecord"]
