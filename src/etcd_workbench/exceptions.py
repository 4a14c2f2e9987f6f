"""Custom exceptions for etcd-workbench.

Failures raised while serving a request are classified once, at the
front controller boundary (see api/errors.py):

Domain errors (client receives a result envelope with HTTP 200):
    - InvalidKeySpecError: Key material for secret encryption is unusable
    - EtcdExecuteError: The etcd client failed to execute an operation
    - TimeoutError (builtin): An etcd operation exceeded its time budget

Startup errors (process exits):
    - ConfigurationError: Configuration file missing fields or malformed

Usage:
    from etcd_workbench.exceptions import EtcdExecuteError
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "EtcdExecuteError",
    "InvalidKeySpecError",
    "KEY_SPEC_ERRORS",
]

from cryptography.exceptions import InvalidKey, UnsupportedAlgorithm


class ConfigurationError(Exception):
    """Raised when the server configuration cannot be loaded or is invalid."""


class InvalidKeySpecError(ValueError):
    """Raised when key material cannot be used for encrypting stored secrets.

    Covers malformed keys and keys of an unsupported length, e.g. a
    config_encrypt_key that is not a valid AES key size.
    """


class EtcdExecuteError(Exception):
    """Raised when the etcd client fails to execute an operation.

    Wraps connection refusals, authentication failures against etcd and
    server-side errors. The message is shown to the UI user as-is.

    Attributes:
        operation: Name of the failed operation (e.g. "get", "put"), if known.
    """

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        """Initialize EtcdExecuteError.

        Args:
            message: Human-readable failure description.
            operation: Name of the failed operation.
        """
        self.operation = operation
        super().__init__(message)


# Exception types that indicate unusable key material
KEY_SPEC_ERRORS: tuple[type[Exception], ...] = (
    InvalidKeySpecError,
    UnsupportedAlgorithm,
    InvalidKey,
)
