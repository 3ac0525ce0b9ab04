from __future__ import annotations

import logging
from typing import Any

from shelter_functions.storage.backends import LocalBackend, MemoryBackend
from shelter_functions.storage.base import StorageBackend
from shelter_functions.storage.settings import StorageSettings

logger = logging.getLogger(__name__)


def easy_storage(backend: str | None = None, **overrides: Any) -> StorageBackend:
    """Build a blob store from ``StorageSettings``; keyword overrides win over env."""
    settings = StorageSettings(**{k: v for k, v in overrides.items() if v is not None})
    kind = backend or settings.backend
    secret = settings.signing_secret.get_secret_value()

    if kind == "memory":
        logger.debug("Using in-memory blob store")
        return MemoryBackend(base_url=settings.base_url or "memory://", signing_secret=secret)
    if kind == "local":
        if not settings.base_path:
            raise ValueError("STORAGE_BASE_PATH must be set for the local blob store")
        base_url = settings.base_url or f"file://{settings.base_path.rstrip('/')}"
        logger.info("Using local blob store at %s", settings.base_path)
        return LocalBackend(settings.base_path, base_url=base_url, signing_secret=secret)
    raise ValueError(f"Unknown storage backend: {kind!r}")


__all__ = ["easy_storage"]
