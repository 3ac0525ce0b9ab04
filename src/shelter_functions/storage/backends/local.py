from __future__ import annotations

import asyncio
import json
from datetime import datetime
from pathlib import Path

from shelter_functions.storage.base import BlobNotFoundError, StorageError, check_key
from shelter_functions.storage.signing import signed_url

_META_SUFFIX = ".meta.json"


class LocalBackend:
    """Filesystem blob store. Content type lives in a ``<key>.meta.json`` sidecar."""

    def __init__(self, base_path: str | Path, *, base_url: str, signing_secret: str):
        self.base_path = Path(base_path)
        self.base_url = base_url
        self._secret = signing_secret

    def _path(self, key: str) -> Path:
        return self.base_path / check_key(key)

    async def put(self, key: str, data: bytes, content_type: str) -> None:
        path = self._path(key)
        meta = {"content_type": content_type}

        def _write() -> None:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
            path.with_name(path.name + _META_SUFFIX).write_text(json.dumps(meta), encoding="utf-8")

        try:
            await asyncio.to_thread(_write)
        except OSError as exc:
            raise StorageError(f"Failed to write {key}: {exc}") from exc

    async def get(self, key: str) -> bytes:
        path = self._path(key)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            raise BlobNotFoundError(f"Blob not found: {key}") from None

    async def exists(self, key: str) -> bool:
        return await asyncio.to_thread(self._path(key).is_file)

    async def get_signed_url(self, key: str, *, expires_at: datetime) -> str:
        if not await self.exists(key):
            raise BlobNotFoundError(f"Blob not found: {key}")
        return signed_url(self.base_url, key, expires_at=expires_at, secret=self._secret)
