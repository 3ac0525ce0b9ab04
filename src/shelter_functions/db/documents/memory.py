from __future__ import annotations

import copy
import uuid
from typing import Any, Mapping

from shelter_functions.db.documents.base import ArrayRemove, ArrayUnion, DocumentNotFoundError


def _apply(current: Any, value: Any) -> Any:
    if isinstance(value, ArrayUnion):
        items = list(current) if isinstance(current, list) else []
        for v in value.values:
            if v not in items:
                items.append(v)
        return items
    if isinstance(value, ArrayRemove):
        items = list(current) if isinstance(current, list) else []
        return [v for v in items if v not in value.values]
    return copy.deepcopy(value)


class InMemoryDocumentStore:
    """Dict-backed document store. Reads and writes hand out deep copies."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def _coll(self, collection: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(collection, {})

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        doc = self._coll(collection).get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def find_one(self, collection: str, field: str, value: Any) -> tuple[str, dict[str, Any]] | None:
        for doc_id, doc in self._coll(collection).items():
            if field in doc and doc[field] == value:
                return doc_id, copy.deepcopy(doc)
        return None

    async def set(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None:
        self._coll(collection)[doc_id] = {k: _apply(None, v) for k, v in data.items()}

    async def update(self, collection: str, doc_id: str, patch: Mapping[str, Any]) -> None:
        doc = self._coll(collection).get(doc_id)
        if doc is None:
            raise DocumentNotFoundError(collection, doc_id)
        for key, value in patch.items():
            doc[key] = _apply(doc.get(key), value)

    async def delete(self, collection: str, doc_id: str) -> None:
        if self._coll(collection).pop(doc_id, None) is None:
            raise DocumentNotFoundError(collection, doc_id)

    async def add(self, collection: str, data: Mapping[str, Any]) -> str:
        doc_id = uuid.uuid4().hex[:20]
        await self.set(collection, doc_id, data)
        return doc_id

    def dump(self, collection: str) -> dict[str, dict[str, Any]]:
        return copy.deepcopy(self._coll(collection))
