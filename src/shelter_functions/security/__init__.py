from .authorization import authorize
from .context import ADMIN_CLAIM, INSTITUTION_CLAIM, CallerContext

__all__ = ["authorize", "CallerContext", "ADMIN_CLAIM", "INSTITUTION_CLAIM"]
