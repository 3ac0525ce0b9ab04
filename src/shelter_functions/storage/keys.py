"""Blob key strategies.

A strategy receives the caller-supplied base name, the file extension and
the raw bytes, and returns the key relative to the image prefix. None of
them check for an existing blob under the chosen key.
"""

from __future__ import annotations

import hashlib
import random
import uuid
from typing import Callable

KeyStrategy = Callable[[str, str, bytes], str]


def random_suffix_key(base_name: str, extension: str, data: bytes) -> str:
    # Collisions inside the 1..1000 range silently overwrite.
    return f"{base_name}{random.randint(1, 1000)}.{extension}"


def uuid_key(base_name: str, extension: str, data: bytes) -> str:
    return f"{base_name}-{uuid.uuid4().hex}.{extension}"


def content_hash_key(base_name: str, extension: str, data: bytes) -> str:
    return f"{base_name}-{hashlib.sha256(data).hexdigest()[:32]}.{extension}"


KEY_STRATEGIES: dict[str, KeyStrategy] = {
    "random": random_suffix_key,
    "uuid": uuid_key,
    "sha256": content_hash_key,
}


def get_key_strategy(name: str) -> KeyStrategy:
    try:
        return KEY_STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown image key strategy: {name!r}") from None


__all__ = [
    "KeyStrategy",
    "KEY_STRATEGIES",
    "random_suffix_key",
    "uuid_key",
    "content_hash_key",
    "get_key_strategy",
]
