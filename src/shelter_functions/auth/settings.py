from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    jwt_secret: SecretStr = SecretStr("dev-only-change-me")
    jwt_algorithm: str = "HS256"
    jwt_lifetime_seconds: int = 60 * 60

    # Claims copied from the token onto the caller context; anything else is dropped.
    trusted_claims: tuple[str, ...] = ("admin", "institution", "email")

    model_config = SettingsConfigDict(env_prefix="AUTH_", env_file=".env", extra="ignore")


_settings: AuthSettings | None = None


def get_auth_settings() -> AuthSettings:
    global _settings
    if _settings is None:
        _settings = AuthSettings()
    return _settings
