from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shelter_functions.api.fastapi.middleware.errors import (
    CatchAllExceptionMiddleware,
    register_error_handlers,
)
from shelter_functions.api.fastapi.router import build_callables_router, health_router
from shelter_functions.app import CURRENT_ENVIRONMENT
from shelter_functions.app.settings import AppSettings, get_app_settings
from shelter_functions.exceptions import InvalidArgumentError
from shelter_functions.functions import FunctionDependencies, default_dependencies

logger = logging.getLogger(__name__)


async def _malformed_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Callable clients expect the callable error body, not FastAPI's 422 shape.
    err = InvalidArgumentError("Request body must be a JSON object with a 'data' field")
    return JSONResponse(status_code=400, content={"error": err.to_dict()})


def create_functions_app(
    deps: FunctionDependencies | None = None,
    *,
    app_settings: AppSettings | None = None,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Build the ASGI app exposing every catalog operation as ``POST /<name>``."""
    settings = app_settings or get_app_settings()
    deps = deps or default_dependencies()

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        try:
            yield
        finally:
            if deps.background.pending:
                logger.info("Waiting for %d background task(s)", deps.background.pending)
            await deps.background.drain()

    app = FastAPI(title=settings.name, version=settings.version, lifespan=lifespan)
    app.state.functions_deps = deps

    origins = cors_origins or settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CatchAllExceptionMiddleware)
    register_error_handlers(app)
    app.add_exception_handler(RequestValidationError, _malformed_request_handler)  # type: ignore[arg-type]

    app.include_router(build_callables_router())
    app.include_router(health_router)

    logger.info(f"{settings.version} version of {settings.name} initialized [env: {CURRENT_ENVIRONMENT}]")
    return app


__all__ = ["create_functions_app"]
