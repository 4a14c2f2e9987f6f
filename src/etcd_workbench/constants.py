"""Application-wide constants for etcd-workbench.

Constants that define application behavior.
For user-configurable settings per deployment, see config.py.
"""

from pathlib import Path

__all__ = [
    # Application identity
    "APP_NAME",
    # Server defaults
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_EXECUTE_TIMEOUT_MILLIS",
    "DEFAULT_DATA_DIR",
    "DEFAULT_CONFIG_ENCRYPT_KEY",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_LOG_LEVEL",
    # HTTP
    "CORS_HEADER",
    "CORS_ALLOW_ORIGIN",
    "STATIC_DIR",
    "STATIC_INDEX",
    "API_SERVER_SHUTDOWN_TIMEOUT_SECONDS",
]

# ============================================================================
# Application identity
# ============================================================================

APP_NAME = "etcd-workbench"

# ============================================================================
# Server defaults
# ============================================================================

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_EXECUTE_TIMEOUT_MILLIS = 3000
DEFAULT_DATA_DIR = "data"
DEFAULT_CONFIG_ENCRYPT_KEY = "etcdWorkbench@*?"
DEFAULT_CONFIG_FILENAME = f"{APP_NAME}.json"
DEFAULT_LOG_LEVEL = "INFO"

# ============================================================================
# HTTP
# ============================================================================

# Applied to every response produced by the front controller
CORS_HEADER = "Access-Control-Allow-Origin"
CORS_ALLOW_ORIGIN = "*"

# Bundled UI build output
STATIC_DIR = Path(__file__).parent / "web" / "static"
STATIC_INDEX = "index.html"

API_SERVER_SHUTDOWN_TIMEOUT_SECONDS = 5
