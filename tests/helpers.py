from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from filevault.config import ServerConfig
from filevault_server.app import create_app


def make_client(root: Path) -> TestClient:
    """Return a client for an app serving ``root`` that does not follow redirects."""

    app = create_app(ServerConfig(storage_root=root))
    return TestClient(app, follow_redirects=False)
