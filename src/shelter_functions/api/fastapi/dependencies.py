from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from shelter_functions.auth import decode_id_token
from shelter_functions.functions import FunctionDependencies
from shelter_functions.security import CallerContext

bearer = HTTPBearer(auto_error=False)


def get_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> CallerContext | None:
    """Caller identity from the bearer ID token; ``None`` when no token is sent.

    Operations decide whether a missing identity is acceptable. A token that
    is present but invalid is always rejected.
    """
    if credentials is None:
        return None
    return decode_id_token(credentials.credentials)


def get_dependencies(request: Request) -> FunctionDependencies:
    return request.app.state.functions_deps
