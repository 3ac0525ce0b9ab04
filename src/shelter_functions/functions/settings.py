from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FunctionsSettings(BaseSettings):
    # Account whose first profile creation grants the admin claim.
    admin_email: Optional[str] = None
    # Static-site build hook hit after catalog writes; unset disables it.
    build_hook_url: Optional[str] = None

    image_prefix: str = "petImages/"
    image_key_strategy: Literal["random", "uuid", "sha256"] = "random"
    signed_url_expires_at: datetime = Field(default=datetime(2491, 3, 9, tzinfo=timezone.utc))

    model_config = SettingsConfigDict(
        env_prefix="FUNCTIONS_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_functions_settings(**kwargs) -> FunctionsSettings:
    filtered = {k: v for k, v in kwargs.items() if v is not None}
    return FunctionsSettings(**filtered)
