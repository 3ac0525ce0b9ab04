from __future__ import annotations

import os
from typing import Any

import httpx

DEFAULT_TIMEOUT_SECONDS = 10.0


def get_default_timeout_seconds() -> float:
    raw = os.getenv("HTTP_CLIENT_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS


def new_async_httpx_client(*, timeout_seconds: float | None = None, **kwargs: Any) -> httpx.AsyncClient:
    timeout = httpx.Timeout(timeout_seconds if timeout_seconds is not None else get_default_timeout_seconds())
    return httpx.AsyncClient(timeout=timeout, **kwargs)


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "get_default_timeout_seconds", "new_async_httpx_client"]
