from .catchall import CatchAllExceptionMiddleware
from .handlers import STATUS_CODES, register_error_handlers

__all__ = ["CatchAllExceptionMiddleware", "STATUS_CODES", "register_error_handlers"]
