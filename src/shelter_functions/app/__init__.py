from .core.env import ENV, IS_DEV, IS_LOCAL, IS_PROD, IS_TEST, Env, current_env

CURRENT_ENVIRONMENT = ENV

__all__ = [
    "CURRENT_ENVIRONMENT",
    "ENV",
    "Env",
    "current_env",
    "IS_LOCAL",
    "IS_DEV",
    "IS_TEST",
    "IS_PROD",
]
