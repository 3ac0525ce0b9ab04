from .base import (
    ArrayRemove,
    ArrayUnion,
    DocumentNotFoundError,
    DocumentRef,
    DocumentStore,
    DocumentStoreError,
)
from .memory import InMemoryDocumentStore
from .mongo import MongoDocumentStore

__all__ = [
    "DocumentStore",
    "DocumentStoreError",
    "DocumentNotFoundError",
    "DocumentRef",
    "ArrayUnion",
    "ArrayRemove",
    "InMemoryDocumentStore",
    "MongoDocumentStore",
]
