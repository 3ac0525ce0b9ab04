from .settings import AuthSettings, get_auth_settings
from .tokens import decode_id_token, issue_id_token

__all__ = ["AuthSettings", "get_auth_settings", "decode_id_token", "issue_id_token"]
