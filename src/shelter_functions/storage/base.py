"""Blob store capability interface.

Backends persist raw bytes under a key and mint signed retrieval URLs.
Keys are relative, slash-separated paths (``petImages/rex412.png``).
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from shelter_functions.exceptions import ShelterFunctionsError


class StorageError(ShelterFunctionsError):
    """Base error for blob store failures."""


class BlobNotFoundError(StorageError):
    pass


class InvalidKeyError(StorageError):
    pass


@runtime_checkable
class StorageBackend(Protocol):
    async def put(self, key: str, data: bytes, content_type: str) -> None: ...

    async def get(self, key: str) -> bytes: ...

    async def exists(self, key: str) -> bool: ...

    async def get_signed_url(self, key: str, *, expires_at: datetime) -> str: ...


def check_key(key: str) -> str:
    if not key or key.startswith("/") or "\\" in key:
        raise InvalidKeyError(f"Invalid storage key: {key!r}")
    if any(part in ("", ".", "..") for part in key.split("/")):
        raise InvalidKeyError(f"Invalid storage key: {key!r}")
    return key


__all__ = [
    "StorageBackend",
    "StorageError",
    "BlobNotFoundError",
    "InvalidKeyError",
    "check_key",
]
