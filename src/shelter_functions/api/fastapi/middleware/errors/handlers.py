from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shelter_functions.exceptions import CallableError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.PERMISSION_DENIED: 403,
    ErrorKind.ALREADY_EXISTS: 409,
}


async def _callable_error_handler(request: Request, exc: CallableError) -> JSONResponse:
    status_code = STATUS_CODES[exc.kind]
    logger.info(
        "%s rejected: %s (%s)",
        request.url.path,
        exc.kind,
        exc.message,
        extra={"http_method": request.method, "path": request.url.path, "status_code": status_code},
    )
    return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CallableError, _callable_error_handler)  # type: ignore[arg-type]
