"""
Admin gate - shared-secret check for the administrative endpoints.
"""
from typing import Optional
import secrets


class AdminGate:
    """Allows a request when its token equals the configured admin secret."""

    def __init__(self, admin_token: str):
        self._admin_token = admin_token

    def allows(self, token: Optional[str]) -> bool:
        if token is None:
            return False
        return secrets.compare_digest(token.encode("utf-8"), self._admin_token.encode("utf-8"))
