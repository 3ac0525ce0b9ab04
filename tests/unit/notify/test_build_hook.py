from __future__ import annotations

import asyncio
import logging

import httpx
import pytest

from shelter_functions.http import DEFAULT_TIMEOUT_SECONDS, new_async_httpx_client
from shelter_functions.notify import BackgroundTasks, BuildHookNotifier, NullNotifier, build_notifier


def _patch_client(mocker, handler):
    def factory(**kwargs):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return mocker.patch("shelter_functions.notify.build_hook.new_async_httpx_client", side_effect=factory)


@pytest.mark.asyncio
async def test_build_hook_posts_to_url(mocker):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, str(request.url)))
        return httpx.Response(200)

    factory = _patch_client(mocker, handler)
    await BuildHookNotifier("https://hooks.test/build/abc", timeout_seconds=2.5).notify()

    assert seen == [("POST", "https://hooks.test/build/abc")]
    factory.assert_called_once_with(timeout_seconds=2.5)


@pytest.mark.asyncio
async def test_build_hook_raises_on_error_status(mocker):
    _patch_client(mocker, lambda request: httpx.Response(502))
    with pytest.raises(httpx.HTTPStatusError):
        await BuildHookNotifier("https://hooks.test/build/abc").notify()


@pytest.mark.asyncio
async def test_null_notifier_is_noop():
    await NullNotifier().notify()


def test_build_notifier_selects_implementation():
    assert isinstance(build_notifier(None), NullNotifier)
    assert isinstance(build_notifier(""), NullNotifier)
    hook = build_notifier("https://hooks.test/x")
    assert isinstance(hook, BuildHookNotifier)
    assert hook.url == "https://hooks.test/x"


def test_default_client_timeout(monkeypatch):
    monkeypatch.delenv("HTTP_CLIENT_TIMEOUT_SECONDS", raising=False)
    client = new_async_httpx_client()
    assert client.timeout.read == DEFAULT_TIMEOUT_SECONDS


class TestBackgroundTasks:
    @pytest.mark.asyncio
    async def test_failure_is_logged_not_raised(self, caplog):
        tasks = BackgroundTasks()

        async def boom():
            raise RuntimeError("hook down")

        with caplog.at_level(logging.WARNING, logger="shelter_functions.notify.background"):
            tasks.fire_and_forget(boom(), name="create-pet:notify-build")
            await tasks.drain()

        assert tasks.pending == 0
        assert "create-pet:notify-build failed: hook down" in caplog.text

    @pytest.mark.asyncio
    async def test_drain_waits_for_pending(self):
        tasks = BackgroundTasks()
        done = []

        async def slow():
            await asyncio.sleep(0.01)
            done.append(True)

        tasks.fire_and_forget(slow())
        assert tasks.pending == 1
        await tasks.drain()
        assert done == [True]
        assert tasks.pending == 0
