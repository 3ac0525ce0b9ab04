from . import institutions, pets, profiles  # noqa: F401  (registers the catalog)
from .deps import FunctionDependencies, default_dependencies
from .pipeline import Stage, invoke
from .registry import CATALOG, CallRequest, Operation, callable_function, get_operation
from .settings import FunctionsSettings, get_functions_settings

__all__ = [
    "CATALOG",
    "CallRequest",
    "Operation",
    "Stage",
    "FunctionDependencies",
    "FunctionsSettings",
    "callable_function",
    "default_dependencies",
    "get_functions_settings",
    "get_operation",
    "invoke",
]
