"""Runtime configuration for etcd-workbench.

Defines the runtime configuration model and the loader that builds it
from the JSON configuration file at startup.

The configuration is constructed once, before the HTTP server accepts
traffic, and passed by reference into the application factory. Nothing
reads it from module-level state.

Example configuration file:
    {
        "server": {
            "port": 8080,
            "data_dir": "./data",
            "execute_timeout_millis": 3000,
            "enable_heartbeat": true
        },
        "auth": {
            "enable": true,
            "users": ["admin:secret", "viewer:viewer-pass"]
        }
    }

Example usage:
    config = load_runtime_config(Path("etcd-workbench.json"))
    app = create_app(config)
"""

from __future__ import annotations

__all__ = [
    "AuthSection",
    "ConfigFile",
    "RuntimeConfig",
    "ServerSection",
    "load_runtime_config",
    "parse_user_entry",
]

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from etcd_workbench.constants import (
    APP_NAME,
    DEFAULT_CONFIG_ENCRYPT_KEY,
    DEFAULT_DATA_DIR,
    DEFAULT_EXECUTE_TIMEOUT_MILLIS,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
)
from etcd_workbench.exceptions import ConfigurationError

_logger = logging.getLogger(f"{APP_NAME}.config")


class RuntimeConfig(BaseModel):
    """Process-wide, read-mostly server settings.

    Attributes:
        host: Interface the HTTP server binds to.
        port: HTTP listen port.
        execute_timeout_millis: Time budget for a single etcd operation.
        data_dir: Root directory for per-user data (configs, tokens, logs).
        config_encrypt_key: Key used to encrypt secrets in stored configs.
        enable_auth: Require HTTP Basic credentials on every request.
        users: Registered users (username -> password).
        enable_heartbeat: Expose the heartbeat endpoint to the UI.
        log_level: Console log level.
    """

    host: str = Field(default=DEFAULT_HOST, min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    execute_timeout_millis: int = Field(default=DEFAULT_EXECUTE_TIMEOUT_MILLIS, gt=0)
    data_dir: str = Field(default=DEFAULT_DATA_DIR, min_length=1)
    config_encrypt_key: str = Field(default=DEFAULT_CONFIG_ENCRYPT_KEY, min_length=1)
    enable_auth: bool = False
    users: dict[str, str] = Field(default_factory=dict)
    enable_heartbeat: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def get_user_dir(self, user: str) -> Path:
        """Get the data directory of a user (<data_dir>/<user>).

        Raises:
            ValueError: If user is not a single plain path segment.
        """
        return Path(self.data_dir) / _checked_user_segment(user)

    def get_user_config_dir(self, user: str) -> Path:
        """Get the connection config directory of a user (<data_dir>/<user>/config)."""
        return self.get_user_dir(user) / "config"

    def get_user_token_file(self, user: str) -> Path:
        """Get the token file of a user (<data_dir>/<user>/token)."""
        return self.get_user_dir(user) / "token"

    def add_user(self, user: str, password: str) -> None:
        """Register a user, overwriting any previous password.

        Only called while the configuration is being loaded, before the
        server accepts requests. A duplicate user is not an error: the
        later entry wins and a warning is logged.

        Args:
            user: Username.
            password: Password for HTTP Basic authentication.
        """
        previous = self.users.get(user)
        self.users[user] = password
        if previous is not None:
            _logger.warning(
                {
                    "event": "duplicate_auth_user",
                    "message": f"Duplicate user in [auth] configuration, later entry wins: {user}",
                    "details": {"user": user},
                }
            )


def _checked_user_segment(user: str) -> str:
    """Validate that a username is usable as a single directory name.

    Args:
        user: Username to validate.

    Returns:
        The unchanged username.

    Raises:
        ValueError: If the username is empty, absolute, or would escape data_dir.
    """
    if not user or user in (".", ".."):
        raise ValueError(f"Invalid user name: {user!r}")
    if "/" in user or "\\" in user or "\x00" in user:
        raise ValueError(f"Invalid user name: {user!r}")
    return user


# =============================================================================
# Configuration file
# =============================================================================


class ServerSection(BaseModel):
    """[server] section of the configuration file."""

    host: str = Field(default=DEFAULT_HOST, min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    execute_timeout_millis: int = Field(default=DEFAULT_EXECUTE_TIMEOUT_MILLIS, gt=0)
    data_dir: str = Field(default=DEFAULT_DATA_DIR, min_length=1)
    config_encrypt_key: str = Field(default=DEFAULT_CONFIG_ENCRYPT_KEY, min_length=1)
    enable_heartbeat: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = {"extra": "ignore"}


class AuthSection(BaseModel):
    """[auth] section of the configuration file.

    Users are listed as "name:password" entries.
    """

    enable: bool = False
    users: list[str] = Field(default_factory=list)

    model_config = {"extra": "ignore"}


class ConfigFile(BaseModel):
    """On-disk configuration file layout."""

    server: ServerSection = Field(default_factory=ServerSection)
    auth: AuthSection = Field(default_factory=AuthSection)

    model_config = {"extra": "ignore"}  # Ignore unknown sections for forward compat


def parse_user_entry(entry: str) -> tuple[str, str]:
    """Split a "name:password" user entry.

    The password may itself contain ':'; only the first one separates.

    Args:
        entry: User entry from the [auth] section.

    Returns:
        Tuple of (username, password).

    Raises:
        ValueError: If the entry has no separator or an empty name/password.
    """
    user, sep, password = entry.partition(":")
    user = user.strip()
    if not sep or not user or not password:
        raise ValueError("user entry must have the form 'name:password'")
    return user, password


def load_runtime_config(path: Path | None) -> RuntimeConfig:
    """Build the runtime configuration from a configuration file.

    A missing file (or no path) yields the default configuration. Anything
    else that prevents a complete, valid configuration is fatal.

    Args:
        path: Path to the JSON configuration file, or None for defaults.

    Returns:
        RuntimeConfig with users registered in file order.

    Raises:
        ConfigurationError: If the file is unreadable, not valid JSON,
            violates the schema, or contains a malformed user entry.
    """
    if path is None or not path.exists():
        if path is not None:
            _logger.info(
                {
                    "event": "config_not_found",
                    "message": f"Config file not found, using defaults: {path}",
                    "details": {"config_path": str(path)},
                }
            )
        return RuntimeConfig()

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
        file_config = ConfigFile.model_validate(data)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in config file {path}: {e}") from e
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}:\n{e}") from e
    except OSError as e:
        # Covers PermissionError and other file I/O errors
        raise ConfigurationError(f"Failed to read config file {path}: {e}") from e

    server = file_config.server
    config = RuntimeConfig(
        host=server.host,
        port=server.port,
        execute_timeout_millis=server.execute_timeout_millis,
        data_dir=server.data_dir,
        config_encrypt_key=server.config_encrypt_key,
        enable_auth=file_config.auth.enable,
        enable_heartbeat=server.enable_heartbeat,
        log_level=server.log_level,
    )

    for index, entry in enumerate(file_config.auth.users):
        try:
            user, password = parse_user_entry(entry)
        except ValueError as e:
            # Never echo the entry itself, it carries a password
            raise ConfigurationError(f"Invalid [auth] user entry #{index + 1} in {path}: {e}") from e
        config.add_user(user, password)

    if config.enable_auth and not config.users:
        raise ConfigurationError(f"Authentication is enabled but no users are configured in {path}")

    return config
