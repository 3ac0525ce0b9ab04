from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shelter_functions.api.fastapi.dependencies import get_caller, get_dependencies
from shelter_functions.functions import CATALOG, FunctionDependencies, Operation, invoke
from shelter_functions.security import CallerContext


class CallableRequest(BaseModel):
    data: Any = None


class CallableResponse(BaseModel):
    result: Any = None


def _make_endpoint(op: Operation):
    async def endpoint(
        body: CallableRequest,
        caller: CallerContext | None = Depends(get_caller),
        deps: FunctionDependencies = Depends(get_dependencies),
    ) -> CallableResponse:
        return CallableResponse(result=await invoke(op, body.data, caller, deps))

    endpoint.__name__ = op.name.replace("-", "_")
    return endpoint


def build_callables_router() -> APIRouter:
    router = APIRouter(tags=["callables"])
    for name, op in sorted(CATALOG.items()):
        router.add_api_route(
            f"/{name}",
            _make_endpoint(op),
            methods=["POST"],
            response_model=CallableResponse,
            name=name,
            summary=f"{name} ({op.tier})",
        )
    return router


health_router = APIRouter(tags=["health"])


@health_router.get("/_health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
