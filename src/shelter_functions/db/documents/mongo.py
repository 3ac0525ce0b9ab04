from __future__ import annotations

import uuid
from typing import Any, Mapping

from shelter_functions.db.documents.base import (
    ArrayRemove,
    ArrayUnion,
    DocumentNotFoundError,
    DocumentRef,
)

_REF_KEY = "_ref"


def _encode(value: Any) -> Any:
    if isinstance(value, DocumentRef):
        return {_REF_KEY: value.path}
    if isinstance(value, Mapping):
        return {k: _encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    return value


def _decode(value: Any) -> Any:
    if isinstance(value, dict):
        if set(value) == {_REF_KEY}:
            return DocumentRef.from_path(value[_REF_KEY])
        return {k: _decode(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_decode(v) for v in value]
    return value


def _strip_id(doc: dict[str, Any]) -> dict[str, Any]:
    return _decode({k: v for k, v in doc.items() if k != "_id"})


def build_update(patch: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a patch with array sentinels into a Mongo update document."""
    ops: dict[str, dict[str, Any]] = {}
    for key, value in patch.items():
        if isinstance(value, ArrayUnion):
            ops.setdefault("$addToSet", {})[key] = {"$each": [_encode(v) for v in value.values]}
        elif isinstance(value, ArrayRemove):
            ops.setdefault("$pull", {})[key] = {"$in": [_encode(v) for v in value.values]}
        else:
            ops.setdefault("$set", {})[key] = _encode(value)
    return ops


class MongoDocumentStore:
    """Document store over a motor ``AsyncIOMotorDatabase``; collections map 1:1."""

    def __init__(self, db: Any):
        self._db = db

    @classmethod
    def from_url(cls, url: str, database: str) -> MongoDocumentStore:
        from motor.motor_asyncio import AsyncIOMotorClient

        return cls(AsyncIOMotorClient(url)[database])

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        doc = await self._db[collection].find_one({"_id": doc_id})
        return _strip_id(doc) if doc is not None else None

    async def find_one(self, collection: str, field: str, value: Any) -> tuple[str, dict[str, Any]] | None:
        doc = await self._db[collection].find_one({field: _encode(value)})
        if doc is None:
            return None
        return str(doc["_id"]), _strip_id(doc)

    async def set(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None:
        await self._db[collection].replace_one({"_id": doc_id}, _encode(dict(data)), upsert=True)

    async def update(self, collection: str, doc_id: str, patch: Mapping[str, Any]) -> None:
        if not patch:
            if await self._db[collection].count_documents({"_id": doc_id}, limit=1) == 0:
                raise DocumentNotFoundError(collection, doc_id)
            return
        result = await self._db[collection].update_one({"_id": doc_id}, build_update(patch))
        if result.matched_count == 0:
            raise DocumentNotFoundError(collection, doc_id)

    async def delete(self, collection: str, doc_id: str) -> None:
        result = await self._db[collection].delete_one({"_id": doc_id})
        if result.deleted_count == 0:
            raise DocumentNotFoundError(collection, doc_id)

    async def add(self, collection: str, data: Mapping[str, Any]) -> str:
        doc_id = uuid.uuid4().hex[:20]
        await self._db[collection].insert_one({"_id": doc_id, **_encode(dict(data))})
        return doc_id
