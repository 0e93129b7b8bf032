from __future__ import annotations

import logging

from filevault.config import ServerConfig
from filevault.errors import StorageError
from filevault.operations import FileOperations
from filevault.resolver import PathResolver

logger = logging.getLogger("filevault.server")


class Storage:
    def __init__(self, config: ServerConfig):
        self.root = config.storage_root
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"cannot create storage root {self.root}: {exc}") from exc
        self.resolver = PathResolver(self.root)
        self.files = FileOperations()
        logger.info("Serving files from %s", self.root)
