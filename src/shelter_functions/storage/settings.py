from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """
    Blob store settings.

    Env:
      STORAGE_BACKEND=memory|local, STORAGE_BASE_PATH, STORAGE_BASE_URL,
      STORAGE_SIGNING_SECRET
    """

    backend: Literal["memory", "local"] = Field(default="memory")
    base_path: Optional[str] = Field(default=None)
    base_url: Optional[str] = Field(default=None)
    signing_secret: SecretStr = Field(default=SecretStr("dev-only-change-me"))

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        extra="ignore",
    )
