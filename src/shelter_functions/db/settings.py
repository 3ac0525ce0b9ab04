from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DBSettings(BaseSettings):
    """
    Document store settings.

    Env support:
      - DB_BACKEND=memory|mongo, DB_DATABASE_URL, DB_DATABASE_NAME
      - MONGO_URL is accepted as a fallback for DB_DATABASE_URL.
    """

    backend: Literal["memory", "mongo"] = Field(default="memory")
    database_url: Optional[str] = Field(default=None)
    database_name: str = Field(default="shelter")

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def resolved_database_url(self) -> str:
        url = self.database_url or os.getenv("MONGO_URL")
        if not url:
            raise ValueError("DB_DATABASE_URL or MONGO_URL must be set for the mongo document store")
        return url


@lru_cache
def get_db_settings(**kwargs) -> DBSettings:
    filtered = {k: v for k, v in kwargs.items() if v is not None}
    return DBSettings(**filtered)
