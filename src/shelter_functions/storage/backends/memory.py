from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shelter_functions.storage.base import BlobNotFoundError, check_key
from shelter_functions.storage.signing import signed_url


@dataclass
class StoredBlob:
    data: bytes
    content_type: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class MemoryBackend:
    """In-process blob store for tests and local development."""

    def __init__(self, *, base_url: str = "memory://", signing_secret: str = "memory"):
        self.base_url = base_url
        self._secret = signing_secret
        self._blobs: dict[str, StoredBlob] = {}

    async def put(self, key: str, data: bytes, content_type: str) -> None:
        check_key(key)
        self._blobs[key] = StoredBlob(data=bytes(data), content_type=content_type)

    async def get(self, key: str) -> bytes:
        return self._require(key).data

    async def exists(self, key: str) -> bool:
        return key in self._blobs

    async def get_signed_url(self, key: str, *, expires_at: datetime) -> str:
        self._require(key)
        return signed_url(self.base_url, key, expires_at=expires_at, secret=self._secret)

    def content_type(self, key: str) -> str:
        return self._require(key).content_type

    def keys(self) -> list[str]:
        return sorted(self._blobs)

    def _require(self, key: str) -> StoredBlob:
        try:
            return self._blobs[key]
        except KeyError:
            raise BlobNotFoundError(f"Blob not found: {key}") from None
