from __future__ import annotations

import logging

from .documents import DocumentStore, InMemoryDocumentStore, MongoDocumentStore
from .settings import DBSettings, get_db_settings

logger = logging.getLogger(__name__)


def easy_documents(settings: DBSettings | None = None) -> DocumentStore:
    cfg = settings or get_db_settings()
    if cfg.backend == "mongo":
        logger.info("Using mongo document store (database=%s)", cfg.database_name)
        return MongoDocumentStore.from_url(cfg.resolved_database_url, cfg.database_name)
    logger.debug("Using in-memory document store")
    return InMemoryDocumentStore()


__all__ = ["DBSettings", "get_db_settings", "easy_documents"]
