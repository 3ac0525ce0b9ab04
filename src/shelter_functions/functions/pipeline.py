"""Request pipeline shared by every catalog operation.

Stages run strictly in order: AUTHORIZE, VALIDATE, EXECUTE, NOTIFY. The
first two never touch a store, so a rejected call has no side effects.
NOTIFY only schedules a detached task; the result returned by EXECUTE is
final before it runs.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, Mapping

from shelter_functions.functions.deps import FunctionDependencies
from shelter_functions.functions.registry import CallRequest, Operation, get_operation
from shelter_functions.security import CallerContext, authorize
from shelter_functions.validation import validate

logger = logging.getLogger(__name__)


class Stage(StrEnum):
    AUTHORIZE = "authorize"
    VALIDATE = "validate"
    EXECUTE = "execute"
    NOTIFY = "notify"


async def invoke(
    operation: str | Operation,
    data: Mapping[str, Any],
    caller: CallerContext | None,
    deps: FunctionDependencies,
) -> Any:
    op = operation if isinstance(operation, Operation) else get_operation(operation)
    uid = caller.uid if caller is not None else None

    def _enter(stage: Stage) -> None:
        logger.debug("%s: %s", op.name, stage, extra={"operation": op.name, "uid": uid, "stage": str(stage)})

    if op.require_auth:
        _enter(Stage.AUTHORIZE)
        authorize(caller, require_admin=op.require_admin, require_institution=op.require_institution)

    _enter(Stage.VALIDATE)
    validate(data, op.schema_for(data) if isinstance(data, Mapping) else {})

    _enter(Stage.EXECUTE)
    result = await op.handler(CallRequest(data=data, caller=caller, deps=deps))

    if op.notify_build:
        _enter(Stage.NOTIFY)
        deps.background.fire_and_forget(deps.notifier.notify(), name=f"{op.name}:notify-build")

    return result


__all__ = ["Stage", "invoke"]
