from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

ADMIN_CLAIM = "admin"
INSTITUTION_CLAIM = "institution"


@dataclass(frozen=True)
class CallerContext:
    """Authenticated caller attached to a single invocation.

    ``claims`` is copied into a read-only mapping so operations cannot
    mutate the identity they were handed.
    """

    uid: str
    claims: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "claims", MappingProxyType(dict(self.claims)))

    def has_claim(self, name: str) -> bool:
        return bool(self.claims.get(name))

    @property
    def is_admin(self) -> bool:
        return self.has_claim(ADMIN_CLAIM)

    @property
    def is_institution(self) -> bool:
        return self.has_claim(INSTITUTION_CLAIM)

    @property
    def email(self) -> str | None:
        value = self.claims.get("email")
        return value if isinstance(value, str) else None


__all__ = ["ADMIN_CLAIM", "INSTITUTION_CLAIM", "CallerContext"]
