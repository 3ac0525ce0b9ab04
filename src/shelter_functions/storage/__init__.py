from .base import BlobNotFoundError, InvalidKeyError, StorageBackend, StorageError
from .easy import easy_storage
from .images import decode_data_url, ingest_image
from .settings import StorageSettings

__all__ = [
    "StorageBackend",
    "StorageError",
    "BlobNotFoundError",
    "InvalidKeyError",
    "StorageSettings",
    "easy_storage",
    "decode_data_url",
    "ingest_image",
]
