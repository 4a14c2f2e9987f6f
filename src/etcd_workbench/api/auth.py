"""HTTP Basic authentication gate.

The gate only decides; it neither logs nor builds responses, so it can
be exercised with fabricated headers and user tables. The front
controller turns a rejection into a 401.

Accepted header:
    Authorization: Basic base64("<user>:<password>")
"""

from __future__ import annotations

__all__ = [
    "AuthGate",
    "decode_basic_credentials",
]

import base64
import binascii
import hmac
from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from etcd_workbench.config import RuntimeConfig


def decode_basic_credentials(authorization: str | None) -> tuple[str, str] | None:
    """Extract username and password from a Basic Authorization header.

    Args:
        authorization: Raw Authorization header value.

    Returns:
        Tuple of (username, password), or None if the header is missing,
        uses another scheme, or is not decodable.
    """
    if not authorization:
        return None

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "basic":
        return None

    try:
        decoded = base64.b64decode(parts[1], validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None

    user, sep, password = decoded.partition(":")
    if not sep:
        return None
    return user, password


class AuthGate:
    """Pre-dispatch credential check against the registered users.

    Attributes:
        enabled: When False every request is allowed.
    """

    def __init__(self, enabled: bool, users: Mapping[str, str]) -> None:
        """Initialize the gate.

        Args:
            enabled: Whether authentication is required.
            users: Registered users (username -> password).
        """
        self.enabled = enabled
        self._users = users

    @classmethod
    def from_config(cls, config: "RuntimeConfig") -> "AuthGate":
        """Create a gate from the runtime configuration."""
        return cls(enabled=config.enable_auth, users=config.users)

    def is_authorized(self, authorization: str | None) -> bool:
        """Check whether a request may proceed to routing.

        Args:
            authorization: Raw Authorization header value, if any.

        Returns:
            True if auth is disabled or the credentials match a registered user.
        """
        if not self.enabled:
            return True

        credentials = decode_basic_credentials(authorization)
        if credentials is None:
            return False

        user, password = credentials
        expected = self._users.get(user)
        if expected is None:
            return False
        # Constant-time comparison, prevents timing attacks
        return hmac.compare_digest(password.encode("utf-8"), expected.encode("utf-8"))
