"""Confined single-root file storage: path resolution and file operations."""

from .errors import ErrorKind, StorageError
from .operations import EntryKind, FileEntry, FileOperations, OpResult
from .resolver import PathResolver, ResolvedPath, is_within

__all__ = [
    "EntryKind",
    "ErrorKind",
    "FileEntry",
    "FileOperations",
    "OpResult",
    "PathResolver",
    "ResolvedPath",
    "StorageError",
    "is_within",
]
