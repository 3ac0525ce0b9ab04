"""Document store capability interface.

Documents are plain dicts addressed by ``(collection, id)``. Values may hold
``DocumentRef`` references to other documents. ``update`` patches accept
``ArrayUnion``/``ArrayRemove`` sentinels that the store applies atomically
per document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable

from shelter_functions.exceptions import ShelterFunctionsError


class DocumentStoreError(ShelterFunctionsError):
    pass


class DocumentNotFoundError(DocumentStoreError):
    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"No document to update or delete: {collection}/{doc_id}")
        self.collection = collection
        self.doc_id = doc_id


@dataclass(frozen=True)
class DocumentRef:
    collection: str
    id: str

    @property
    def path(self) -> str:
        return f"{self.collection}/{self.id}"

    @classmethod
    def from_path(cls, path: str) -> DocumentRef:
        collection, _, doc_id = path.partition("/")
        if not collection or not doc_id:
            raise ValueError(f"Not a document path: {path!r}")
        return cls(collection, doc_id)


class ArrayUnion:
    """Append each value not already present in the target array."""

    def __init__(self, *values: Any):
        self.values = tuple(values)

    def __repr__(self) -> str:
        return f"ArrayUnion{self.values!r}"


class ArrayRemove:
    """Remove every occurrence of each value from the target array."""

    def __init__(self, *values: Any):
        self.values = tuple(values)

    def __repr__(self) -> str:
        return f"ArrayRemove{self.values!r}"


@runtime_checkable
class DocumentStore(Protocol):
    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None: ...

    async def find_one(
        self, collection: str, field: str, value: Any
    ) -> tuple[str, dict[str, Any]] | None: ...

    async def set(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None: ...

    async def update(self, collection: str, doc_id: str, patch: Mapping[str, Any]) -> None: ...

    async def delete(self, collection: str, doc_id: str) -> None: ...

    async def add(self, collection: str, data: Mapping[str, Any]) -> str: ...


__all__ = [
    "DocumentStore",
    "DocumentStoreError",
    "DocumentNotFoundError",
    "DocumentRef",
    "ArrayUnion",
    "ArrayRemove",
]
