"""Bundled UI asset resolution.

Serves files from the built UI directory when no API route matches.
Resolution is literal: the request path is looked up under the asset
root, with no directory listing and no SPA rewrite. A path that names no
asset yields None so the caller can fall through to its own 404.
"""

from __future__ import annotations

__all__ = [
    "CONTENT_TYPES",
    "StaticAssetResolver",
    "content_type_for",
    "is_safe_path",
]

import logging
from pathlib import Path

from fastapi.responses import PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from etcd_workbench.constants import APP_NAME, CORS_ALLOW_ORIGIN, CORS_HEADER, STATIC_INDEX

_logger = logging.getLogger(f"{APP_NAME}.api.static")

# Suffix -> Content-Type, first match wins. Case-sensitive.
CONTENT_TYPES: tuple[tuple[str, str], ...] = (
    (".html", "text/html;charset=utf-8"),
    (".css", "text/css;charset=utf-8"),
    (".js", "application/javascript"),
    ("woff", "application/font-woff"),
    ("ttf", "application/font-ttf"),
    (".png", "image/png"),
    (".jpg", "image/jpeg"),
    (".jpeg", "image/jpeg"),
    (".svg", "image/svg+xml"),
    (".awebp", "image/webp"),
)


def content_type_for(path: str) -> str | None:
    """Select the Content-Type for an asset path.

    Args:
        path: Request path of the asset.

    Returns:
        Content-Type from CONTENT_TYPES, or None for unlisted suffixes.
    """
    for suffix, content_type in CONTENT_TYPES:
        if path.endswith(suffix):
            return content_type
    return None


def is_safe_path(base_dir: Path, requested_path: Path) -> bool:
    """Check if requested path is safely within base directory.

    Prevents path traversal attacks (e.g., ../../etc/passwd).

    Args:
        base_dir: Base directory that should contain the path.
        requested_path: Path to validate.

    Returns:
        True if path is safely within base_dir.
    """
    try:
        return requested_path.resolve().is_relative_to(base_dir.resolve())
    except (ValueError, RuntimeError, OSError):
        return False


class StaticAssetResolver:
    """Look up and serve bundled assets below a root directory."""

    def __init__(self, root: Path) -> None:
        """Initialize the resolver.

        Args:
            root: Asset root directory (the UI build output).
        """
        self.root = root

    def locate(self, path: str) -> Path | None:
        """Map a request path to an existing asset file.

        Args:
            path: URL path, e.g. "/assets/index.js". "/" maps to the index page.

        Returns:
            Path of the asset file, or None if there is no such asset.
        """
        relative = path.lstrip("/") or STATIC_INDEX
        segments = relative.split("/")
        if ".." in segments or any("\\" in segment for segment in segments):
            _logger.warning(
                {
                    "event": "path_traversal_blocked",
                    "message": f"Path traversal attempt blocked: {path}",
                    "path": path,
                }
            )
            return None

        asset = self.root / relative
        if not is_safe_path(self.root, asset):
            _logger.warning(
                {
                    "event": "path_traversal_blocked",
                    "message": f"Path outside asset root blocked: {path}",
                    "path": path,
                }
            )
            return None

        try:
            if not asset.is_file():
                return None
        except OSError:
            # e.g. ENAMETOOLONG for an overlong file name
            return None
        return asset

    async def resolve(self, path: str) -> Response | None:
        """Build the response for an asset, if one exists.

        The file is read in Starlette's bounded threadpool so large assets
        don't stall the event loop.

        Args:
            path: URL path of the request.

        Returns:
            200 response with the asset bytes, 500 response if reading fails,
            or None if no asset exists for the path.
        """
        asset = self.locate(path)
        if asset is None:
            return None

        try:
            data = await run_in_threadpool(asset.read_bytes)
        except OSError as e:
            _logger.error(
                {
                    "event": "static_read_failed",
                    "message": f"Failed to read static asset {path}",
                    "path": path,
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                }
            )
            return PlainTextResponse(
                content=str(e),
                status_code=500,
                headers={CORS_HEADER: CORS_ALLOW_ORIGIN},
            )

        # Content type follows the file actually served ("/" -> index.html)
        served_path = path if path.lstrip("/") else f"/{STATIC_INDEX}"
        return Response(
            content=data,
            status_code=200,
            headers={
                "Content-Length": str(len(data)),
                "Content-Encoding": "UTF-8",
                CORS_HEADER: CORS_ALLOW_ORIGIN,
                # Static responses are not kept alive
                "Connection": "close",
            },
            media_type=content_type_for(served_path),
        )
