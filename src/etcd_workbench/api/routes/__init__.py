"""API routes served by etcd-workbench itself."""

from . import heartbeat

__all__ = ["heartbeat"]
