from __future__ import annotations

import uuid
from typing import Any, Mapping

from shelter_functions.identity.base import UserNotFoundError, UserRecord


class InMemoryIdentityProvider:
    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}

    def create_user(
        self,
        *,
        uid: str | None = None,
        email: str | None = None,
        claims: Mapping[str, Any] | None = None,
    ) -> UserRecord:
        record = UserRecord(uid=uid or uuid.uuid4().hex, email=email, custom_claims=dict(claims or {}))
        self._users[record.uid] = record
        return record

    async def get_user(self, uid: str) -> UserRecord:
        try:
            return self._users[uid]
        except KeyError:
            raise UserNotFoundError(f"No user record found for uid: {uid}") from None

    async def get_user_by_email(self, email: str) -> UserRecord:
        for record in self._users.values():
            if record.email is not None and record.email.lower() == email.lower():
                return record
        raise UserNotFoundError(f"No user record found for email: {email}")

    async def ensure_user(self, uid: str, *, email: str | None = None) -> UserRecord:
        current = self._users.get(uid)
        if current is None:
            return self.create_user(uid=uid, email=email)
        if current.email is None and email:
            current = UserRecord(uid=uid, email=email, custom_claims=current.custom_claims)
            self._users[uid] = current
        return current

    async def set_claims(self, uid: str, claims: Mapping[str, Any]) -> None:
        current = await self.get_user(uid)
        self._users[uid] = UserRecord(uid=current.uid, email=current.email, custom_claims=dict(claims))
