from __future__ import annotations

import hashlib
import hmac
from datetime import datetime
from urllib.parse import quote


def sign(secret: str, key: str, expires: int) -> str:
    message = f"{key}\n{expires}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def signed_url(base_url: str, key: str, *, expires_at: datetime, secret: str) -> str:
    """Build ``<base_url>/<key>?expires=<ts>&signature=<hmac>``."""
    expires = int(expires_at.timestamp())
    signature = sign(secret, key, expires)
    base = base_url if base_url.endswith("/") else base_url + "/"
    return f"{base}{quote(key)}?expires={expires}&signature={signature}"


__all__ = ["sign", "signed_url"]
