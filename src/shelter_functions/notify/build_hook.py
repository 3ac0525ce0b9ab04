from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from shelter_functions.http import new_async_httpx_client

logger = logging.getLogger(__name__)


@runtime_checkable
class BuildNotifier(Protocol):
    async def notify(self) -> None: ...


class BuildHookNotifier:
    """POSTs to a static-site build hook so the public catalog gets rebuilt."""

    def __init__(self, url: str, *, timeout_seconds: float | None = None):
        self.url = url
        self.timeout_seconds = timeout_seconds

    async def notify(self) -> None:
        async with new_async_httpx_client(timeout_seconds=self.timeout_seconds) as client:
            response = await client.post(self.url)
            response.raise_for_status()
        logger.info("Build hook triggered (%s)", response.status_code)


class NullNotifier:
    async def notify(self) -> None:
        logger.debug("No build hook configured; skipping notification")


def build_notifier(url: str | None) -> BuildNotifier:
    return BuildHookNotifier(url) if url else NullNotifier()
