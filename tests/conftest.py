"""
Root conftest.py for shelter-functions tests.

Provides:
1. Marker registration and path-based auto-marking
2. In-memory collaborator fixtures (documents, identity, blobs, notifier)
3. Caller contexts for each authorization tier
4. An httpx client bound to the callable ASGI app
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from shelter_functions.auth import AuthSettings
from shelter_functions.db.documents import InMemoryDocumentStore
from shelter_functions.functions import FunctionDependencies, FunctionsSettings
from shelter_functions.identity import InMemoryIdentityProvider
from shelter_functions.security import CallerContext
from shelter_functions.storage.backends import MemoryBackend
from tests.helpers import ADMIN_EMAIL, RecordingNotifier


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Tag tests by folder so `-m security` / `-m acceptance` select them."""
    for item in items:
        norm = str(item.fspath).replace("\\", "/")
        if any(f"/tests/unit/{d}/" in norm for d in ("security", "auth", "identity")):
            item.add_marker(pytest.mark.security)
        if "/tests/unit/storage/" in norm:
            item.add_marker(pytest.mark.storage)
        if "/tests/unit/db/" in norm:
            item.add_marker(pytest.mark.documents)
        if "/tests/unit/functions/" in norm:
            item.add_marker(pytest.mark.functions)
        if "/tests/acceptance/" in norm:
            item.add_marker(pytest.mark.acceptance)


def pytest_configure(config):
    for name, desc in [
        ("security", "Authorization and token tests"),
        ("storage", "Blob store and image ingestion tests"),
        ("documents", "Document store tests"),
        ("functions", "Callable operation tests"),
        ("acceptance", "End-to-end tests over the HTTP surface"),
    ]:
        config.addinivalue_line("markers", f"{name}: {desc}")


# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================


@pytest.fixture
def documents() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def identity() -> InMemoryIdentityProvider:
    provider = InMemoryIdentityProvider()
    provider.create_user(uid="admin-uid", email=ADMIN_EMAIL, claims={"admin": True})
    provider.create_user(uid="inst-uid", email="shelter@example.com", claims={"institution": True})
    provider.create_user(uid="alice-uid", email="alice@example.com")
    provider.create_user(uid="bob-uid", email="bob@example.com")
    return provider


@pytest.fixture
def storage() -> MemoryBackend:
    return MemoryBackend(signing_secret="test-secret")


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def functions_settings() -> FunctionsSettings:
    return FunctionsSettings(admin_email=ADMIN_EMAIL, build_hook_url=None)


@pytest.fixture
def deps(documents, identity, storage, notifier, functions_settings) -> FunctionDependencies:
    return FunctionDependencies(
        documents=documents,
        identity=identity,
        storage=storage,
        notifier=notifier,
        settings=functions_settings,
    )


# =============================================================================
# CALLERS
# =============================================================================


@pytest.fixture
def admin_caller() -> CallerContext:
    return CallerContext(uid="admin-uid", claims={"admin": True})


@pytest.fixture
def institution_caller() -> CallerContext:
    return CallerContext(uid="inst-uid", claims={"institution": True})


@pytest.fixture
def alice() -> CallerContext:
    return CallerContext(uid="alice-uid")


@pytest.fixture
def bob() -> CallerContext:
    return CallerContext(uid="bob-uid")


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def auth_settings(monkeypatch) -> AuthSettings:
    """Pin the token secret so tokens minted in tests verify inside the app."""
    settings = AuthSettings(jwt_secret="test-jwt-secret")
    monkeypatch.setattr("shelter_functions.auth.settings._settings", settings)
    return settings


@pytest_asyncio.fixture
async def api_client(deps, auth_settings):
    from shelter_functions.api.fastapi import create_functions_app

    app = create_functions_app(deps, cors_origins=["http://testserver"])
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
