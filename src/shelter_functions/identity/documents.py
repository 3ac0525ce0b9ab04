"""User records kept in the application's own document store.

Each user is ``users/{uid}`` with ``email``, a lowercased ``emailKey`` for
lookups and ``customClaims``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from shelter_functions.db.documents import DocumentNotFoundError, DocumentStore
from shelter_functions.identity.base import UserNotFoundError, UserRecord

logger = logging.getLogger(__name__)

USERS = "users"


def _record(uid: str, doc: Mapping[str, Any]) -> UserRecord:
    return UserRecord(uid=uid, email=doc.get("email"), custom_claims=dict(doc.get("customClaims") or {}))


class DocumentIdentityProvider:
    def __init__(self, documents: DocumentStore, *, collection: str = USERS):
        self.documents = documents
        self.collection = collection

    async def create_user(
        self,
        uid: str,
        *,
        email: str | None = None,
        claims: Mapping[str, Any] | None = None,
    ) -> UserRecord:
        """Write ``users/{uid}``, replacing any existing record."""
        await self.documents.set(
            self.collection,
            uid,
            {
                "email": email,
                "emailKey": email.lower() if email else None,
                "customClaims": dict(claims or {}),
            },
        )
        logger.info("Stored user %s", uid)
        return UserRecord(uid=uid, email=email, custom_claims=dict(claims or {}))

    async def get_user(self, uid: str) -> UserRecord:
        doc = await self.documents.get(self.collection, uid)
        if doc is None:
            raise UserNotFoundError(f"No user record found for uid: {uid}")
        return _record(uid, doc)

    async def get_user_by_email(self, email: str) -> UserRecord:
        found = await self.documents.find_one(self.collection, "emailKey", email.lower())
        if found is None:
            raise UserNotFoundError(f"No user record found for email: {email}")
        return _record(*found)

    async def ensure_user(self, uid: str, *, email: str | None = None) -> UserRecord:
        doc = await self.documents.get(self.collection, uid)
        if doc is None:
            return await self.create_user(uid, email=email)
        if not doc.get("email") and email:
            await self.documents.update(self.collection, uid, {"email": email, "emailKey": email.lower()})
            doc = {**doc, "email": email}
        return _record(uid, doc)

    async def set_claims(self, uid: str, claims: Mapping[str, Any]) -> None:
        try:
            await self.documents.update(self.collection, uid, {"customClaims": dict(claims)})
        except DocumentNotFoundError:
            raise UserNotFoundError(f"No user record found for uid: {uid}") from None
