"""Shared fixtures for etcd-workbench tests."""

from __future__ import annotations

import base64
from collections.abc import Callable
from pathlib import Path

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from etcd_workbench.api import create_app
from etcd_workbench.config import RuntimeConfig


def basic_auth(user: str, password: str) -> str:
    """Build a Basic Authorization header value."""
    token = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Create a small UI build directory."""
    root = tmp_path / "static"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text("<html>workbench</html>", encoding="utf-8")
    (root / "assets" / "app.js").write_text("console.log('hi')", encoding="utf-8")
    (root / "assets" / "app.css").write_text("body {}", encoding="utf-8")
    (root / "assets" / "logo.png").write_bytes(b"\x89PNG\r\n")
    (root / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")
    return root


@pytest.fixture
def config(tmp_path: Path) -> RuntimeConfig:
    """Runtime config with auth disabled and data below tmp_path."""
    return RuntimeConfig(data_dir=str(tmp_path / "data"))


@pytest.fixture
def auth_config(tmp_path: Path) -> RuntimeConfig:
    """Runtime config with auth enabled and one registered user."""
    cfg = RuntimeConfig(data_dir=str(tmp_path / "data"), enable_auth=True)
    cfg.add_user("admin", "s3cret")
    return cfg


@pytest.fixture
def make_client(static_dir: Path) -> Callable[..., TestClient]:
    """Factory for test clients over a configured app."""

    def _make(
        cfg: RuntimeConfig,
        routers: tuple[APIRouter, ...] = (),
        raise_server_exceptions: bool = True,
    ) -> TestClient:
        app = create_app(cfg, static_dir=static_dir, routers=routers)
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make
