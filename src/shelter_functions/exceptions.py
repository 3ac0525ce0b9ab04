"""Exception hierarchy for shelter-functions.

``CallableError`` subclasses are the only failures an operation raises on its
own behalf; they carry one of four kinds and map onto the callable error
body. Collaborator failures (document store, identity provider, blob store)
derive from ``ShelterFunctionsError`` directly and pass through untranslated.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    ALREADY_EXISTS = "already-exists"
    UNAUTHENTICATED = "unauthenticated"
    PERMISSION_DENIED = "permission-denied"
    INVALID_ARGUMENT = "invalid-argument"

    @property
    def status(self) -> str:
        """Wire status name, e.g. ``"PERMISSION_DENIED"``."""
        return self.value.replace("-", "_").upper()


class ShelterFunctionsError(Exception):
    """Base exception for everything raised by this package."""


class CallableError(ShelterFunctionsError):
    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"status": self.kind.status, "message": self.message}


class InvalidArgumentError(CallableError):
    kind = ErrorKind.INVALID_ARGUMENT


class MalformedImageError(InvalidArgumentError):
    """Embedded image is not a decodable ``data:<mime>;base64,...`` string."""


class UnauthenticatedError(CallableError):
    kind = ErrorKind.UNAUTHENTICATED


class PermissionDeniedError(CallableError):
    kind = ErrorKind.PERMISSION_DENIED


class AlreadyExistsError(CallableError):
    kind = ErrorKind.ALREADY_EXISTS


__all__ = [
    "ErrorKind",
    "ShelterFunctionsError",
    "CallableError",
    "InvalidArgumentError",
    "MalformedImageError",
    "UnauthenticatedError",
    "PermissionDeniedError",
    "AlreadyExistsError",
]
