from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, Union

from shelter_functions.security import CallerContext, authorize
from shelter_functions.validation import Schema

if TYPE_CHECKING:
    from shelter_functions.functions.deps import FunctionDependencies


@dataclass(frozen=True)
class CallRequest:
    data: Mapping[str, Any]
    caller: CallerContext | None
    deps: FunctionDependencies

    @property
    def authenticated_caller(self) -> CallerContext:
        return authorize(self.caller)

    @property
    def uid(self) -> str:
        return self.authenticated_caller.uid


Handler = Callable[[CallRequest], Awaitable[Any]]
# Most operations declare a fixed schema; a few derive it from the payload.
SchemaSpec = Union[Schema, Callable[[Mapping[str, Any]], Schema]]


@dataclass(frozen=True)
class Operation:
    name: str
    handler: Handler
    schema: SchemaSpec
    require_auth: bool = True
    require_admin: bool = False
    require_institution: bool = False
    notify_build: bool = False

    def __post_init__(self) -> None:
        if (self.require_admin or self.require_institution) and not self.require_auth:
            raise ValueError(f"{self.name}: elevated claims require authentication")

    def schema_for(self, data: Mapping[str, Any]) -> Schema:
        return self.schema(data) if callable(self.schema) else self.schema

    @property
    def tier(self) -> str:
        if not self.require_auth:
            return "public"
        tiers = [t for t, on in (("admin", self.require_admin), ("institution", self.require_institution)) if on]
        return "+".join(tiers) or "authenticated"


CATALOG: dict[str, Operation] = {}


def callable_function(
    name: str,
    *,
    schema: SchemaSpec,
    require_auth: bool = True,
    require_admin: bool = False,
    require_institution: bool = False,
    notify_build: bool = False,
) -> Callable[[Handler], Handler]:
    """Register ``fn`` in ``CATALOG`` under ``name`` with its gate flags and schema."""

    def decorator(fn: Handler) -> Handler:
        if name in CATALOG:
            raise ValueError(f"Operation already registered: {name}")
        CATALOG[name] = Operation(
            name=name,
            handler=fn,
            schema=schema,
            require_auth=require_auth,
            require_admin=require_admin,
            require_institution=require_institution,
            notify_build=notify_build,
        )
        return fn

    return decorator


def get_operation(name: str) -> Operation:
    try:
        return CATALOG[name]
    except KeyError:
        raise KeyError(f"Unknown operation: {name}") from None


__all__ = ["CallRequest", "Operation", "CATALOG", "callable_function", "get_operation"]
