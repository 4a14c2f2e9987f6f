"""HTTP front controller for etcd-workbench.

- result: Result envelope returned for domain outcomes
- auth: HTTP Basic authentication gate
- static: Bundled UI asset resolution
- errors: Exception classification into result envelopes
- controller: Request pipeline (gate, fallback, CORS)
- server: FastAPI application factory
"""

from .server import create_app

__all__ = ["create_app"]
