from __future__ import annotations

from dataclasses import dataclass, field

from shelter_functions.db import easy_documents
from shelter_functions.db.documents import DocumentStore
from shelter_functions.functions.settings import FunctionsSettings, get_functions_settings
from shelter_functions.identity import DocumentIdentityProvider, IdentityProvider
from shelter_functions.notify import BackgroundTasks, BuildNotifier, build_notifier
from shelter_functions.storage import StorageBackend, easy_storage, ingest_image
from shelter_functions.storage.keys import get_key_strategy


@dataclass
class FunctionDependencies:
    """Capabilities handed to every operation; swap any of them for fakes in tests."""

    documents: DocumentStore
    identity: IdentityProvider
    storage: StorageBackend
    notifier: BuildNotifier
    settings: FunctionsSettings = field(default_factory=FunctionsSettings)
    background: BackgroundTasks = field(default_factory=BackgroundTasks)

    async def ingest_image(self, encoded_image: str, base_name: str) -> str:
        return await ingest_image(
            encoded_image,
            base_name,
            storage=self.storage,
            expires_at=self.settings.signed_url_expires_at,
            prefix=self.settings.image_prefix,
            key_strategy=get_key_strategy(self.settings.image_key_strategy),
        )


def default_dependencies(settings: FunctionsSettings | None = None) -> FunctionDependencies:
    """Wire dependencies from env settings.

    User records live in the same document store as the catalog; deployments
    backed by an external identity service construct ``FunctionDependencies``
    themselves.
    """
    cfg = settings or get_functions_settings()
    documents = easy_documents()
    return FunctionDependencies(
        documents=documents,
        identity=DocumentIdentityProvider(documents),
        storage=easy_storage(),
        notifier=build_notifier(cfg.build_hook_url),
        settings=cfg,
    )
