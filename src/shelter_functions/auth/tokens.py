from __future__ import annotations

import time
from typing import Any, Mapping

import jwt

from shelter_functions.auth.settings import AuthSettings, get_auth_settings
from shelter_functions.exceptions import UnauthenticatedError
from shelter_functions.security.context import CallerContext


def issue_id_token(
    uid: str,
    claims: Mapping[str, Any] | None = None,
    *,
    settings: AuthSettings | None = None,
    lifetime_seconds: int | None = None,
) -> str:
    """Mint an ID token for ``uid`` carrying ``claims`` (local development and tests)."""
    cfg = settings or get_auth_settings()
    now = int(time.time())
    payload: dict[str, Any] = dict(claims or {})
    payload.update(
        sub=uid,
        iat=now,
        exp=now + (lifetime_seconds or cfg.jwt_lifetime_seconds),
    )
    return jwt.encode(payload, cfg.jwt_secret.get_secret_value(), algorithm=cfg.jwt_algorithm)


def decode_id_token(token: str, *, settings: AuthSettings | None = None) -> CallerContext:
    cfg = settings or get_auth_settings()
    try:
        payload = jwt.decode(
            token,
            cfg.jwt_secret.get_secret_value(),
            algorithms=[cfg.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.PyJWTError as exc:
        raise UnauthenticatedError(f"Invalid ID token: {exc}") from exc

    claims = {k: payload[k] for k in cfg.trusted_claims if k in payload}
    return CallerContext(uid=str(payload["sub"]), claims=claims)


__all__ = ["issue_id_token", "decode_id_token"]
