"""Single-shot filesystem operations on resolved paths."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from .errors import ErrorKind
from .resolver import ResolvedPath

logger = logging.getLogger(__name__)


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class FileEntry:
    name: str
    kind: EntryKind

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class OpResult:
    """Outcome of a file operation; ``error`` is None on success."""

    error: ErrorKind | None = None
    data: bytes | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def _failure(exc: Exception, target: ResolvedPath) -> OpResult:
    if isinstance(exc, FileNotFoundError):
        return OpResult(error=ErrorKind.NOT_FOUND, detail=str(exc))
    if isinstance(exc, IsADirectoryError):
        return OpResult(error=ErrorKind.IS_DIRECTORY, detail=str(exc))
    logger.error("I/O error on %s: %s", target.name, exc)
    return OpResult(error=ErrorKind.IO_ERROR, detail=str(exc))


class FileOperations:
    """Thin wrapper over the filesystem.

    Every method takes a ``ResolvedPath``; raw user input never reaches
    this layer. Filesystem failures come back as an ``OpResult`` instead
    of being raised.
    """

    def list_entries(self, root: ResolvedPath) -> list[FileEntry]:
        with os.scandir(root) as it:
            entries = [
                FileEntry(name=e.name, kind=EntryKind.DIRECTORY if e.is_dir() else EntryKind.FILE)
                for e in it
            ]
        entries.sort(key=lambda e: e.name)
        return entries

    def create(self, target: ResolvedPath, content: bytes) -> OpResult:
        try:
            target.path.write_bytes(content)
        except (OSError, ValueError) as exc:
            logger.error("I/O error on %s: %s", target.name, exc)
            return OpResult(error=ErrorKind.IO_ERROR, detail=str(exc))
        logger.info("Wrote %d bytes to %s", len(content), target.name)
        return OpResult()

    def read(self, target: ResolvedPath) -> OpResult:
        try:
            if target.path.is_dir():
                return OpResult(error=ErrorKind.IS_DIRECTORY, detail=target.name)
            data = target.path.read_bytes()
        except (OSError, ValueError) as exc:
            return _failure(exc, target)
        return OpResult(data=data)

    def delete(self, target: ResolvedPath) -> OpResult:
        try:
            if target.path.is_dir():
                return OpResult(error=ErrorKind.IS_DIRECTORY, detail=target.name)
            target.path.unlink()
        except (OSError, ValueError) as exc:
            return _failure(exc, target)
        logger.info("Deleted %s", target.name)
        return OpResult()


__all__ = ["EntryKind", "FileEntry", "FileOperations", "OpResult"]
