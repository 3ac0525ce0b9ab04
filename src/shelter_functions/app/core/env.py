"""Deployment environment, read once from ``APP_ENV`` (or ``ENVIRONMENT``).

Only the logging defaults depend on it: DEBUG/plain outside prod, INFO/JSON
in prod.
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum


class Env(StrEnum):
    LOCAL = "local"
    DEV = "dev"
    TEST = "test"
    PROD = "prod"


_ALIASES: dict[str, Env] = {
    "development": Env.DEV,
    "emulator": Env.LOCAL,
    "testing": Env.TEST,
    "staging": Env.TEST,
    "production": Env.PROD,
}


def parse_env(raw: str | None) -> Env | None:
    val = (raw or "").strip().lower()
    if not val:
        return None
    try:
        return Env(val)
    except ValueError:
        return _ALIASES.get(val)


def current_env() -> Env:
    raw = os.getenv("APP_ENV") or os.getenv("ENVIRONMENT")
    env = parse_env(raw)
    if env is None and raw:
        logging.getLogger(__name__).warning("Unrecognized environment %r, using 'local'", raw)
    return env or Env.LOCAL


ENV: Env = current_env()
IS_LOCAL = ENV is Env.LOCAL
IS_DEV = ENV is Env.DEV
IS_TEST = ENV is Env.TEST
IS_PROD = ENV is Env.PROD
