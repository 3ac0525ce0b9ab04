"""Image ingestion: decode a data URL, store the bytes, mint a retrieval URL.

This is the single routine behind every operation that accepts an embedded
image, so create and update paths produce identically shaped references.
"""

from __future__ import annotations

import base64
import binascii
import logging
import mimetypes
import re
from dataclasses import dataclass
from datetime import datetime

from shelter_functions.exceptions import MalformedImageError
from shelter_functions.storage.base import StorageBackend
from shelter_functions.storage.keys import KeyStrategy, random_suffix_key

logger = logging.getLogger(__name__)

_DATA_URL = re.compile(
    r"^data:(?P<mime>[a-zA-Z0-9]+/[a-zA-Z0-9.+-]+)(?P<params>[^,]*),(?P<payload>.*)$",
    re.DOTALL,
)
_UNSAFE_KEY_CHARS = re.compile(r"[^\w.-]+")


@dataclass(frozen=True)
class DecodedImage:
    mime_type: str
    data: bytes

    @property
    def extension(self) -> str:
        guessed = mimetypes.guess_extension(self.mime_type, strict=False)
        if guessed:
            return guessed.lstrip(".")
        subtype = self.mime_type.split("/", 1)[1]
        return _UNSAFE_KEY_CHARS.sub("", subtype.split("+", 1)[0]) or "bin"


def decode_data_url(encoded: str) -> DecodedImage:
    match = _DATA_URL.match(encoded.strip())
    if match is None:
        raise MalformedImageError("Image must be a data URL with a MIME type")
    params = [p.strip().lower() for p in match.group("params").split(";") if p.strip()]
    if "base64" not in params:
        raise MalformedImageError("Image data must be base64 encoded")
    try:
        data = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedImageError(f"Image data is not valid base64: {exc}") from exc
    if not data:
        raise MalformedImageError("Image data is empty")
    return DecodedImage(mime_type=match.group("mime").lower(), data=data)


def _safe_base_name(base_name: str) -> str:
    return _UNSAFE_KEY_CHARS.sub("_", base_name).strip("._") or "image"


async def ingest_image(
    encoded_image: str,
    base_name: str,
    *,
    storage: StorageBackend,
    expires_at: datetime,
    prefix: str = "petImages/",
    key_strategy: KeyStrategy = random_suffix_key,
) -> str:
    """Persist an embedded image and return its signed retrieval URL.

    Decoding happens before any storage call, so a malformed payload leaves
    the blob store untouched. Storage failures propagate unchanged.
    """
    image = decode_data_url(encoded_image)
    key = prefix + key_strategy(_safe_base_name(base_name), image.extension, image.data)

    await storage.put(key, image.data, image.mime_type)
    url = await storage.get_signed_url(key, expires_at=expires_at)
    logger.info("Stored image %s (%d bytes, %s)", key, len(image.data), image.mime_type)
    return url


__all__ = ["DecodedImage", "decode_data_url", "ingest_image"]
