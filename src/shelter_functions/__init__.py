from . import app

from .exceptions import (
    AlreadyExistsError,
    CallableError,
    ErrorKind,
    InvalidArgumentError,
    MalformedImageError,
    PermissionDeniedError,
    ShelterFunctionsError,
    UnauthenticatedError,
)

__all__ = [
    "app",
    # Errors
    "ShelterFunctionsError",
    "CallableError",
    "ErrorKind",
    "InvalidArgumentError",
    "MalformedImageError",
    "UnauthenticatedError",
    "PermissionDeniedError",
    "AlreadyExistsError",
]
