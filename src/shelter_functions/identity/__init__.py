from .base import IdentityError, IdentityProvider, UserNotFoundError, UserRecord
from .documents import DocumentIdentityProvider
from .memory import InMemoryIdentityProvider

__all__ = [
    "IdentityProvider",
    "IdentityError",
    "UserNotFoundError",
    "UserRecord",
    "DocumentIdentityProvider",
    "InMemoryIdentityProvider",
]
