"""Lexical confinement of user supplied paths to the storage root.

Containment is decided on path strings only. Symbolic links inside the
root are not followed, so a link pointing outside the root is still
reachable through it; resolve links before calling ``is_within`` if
that matters for a deployment.
"""

from __future__ import annotations

import logging
import os
import posixpath
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_LEADING_PARENTS = re.compile(r"^(?:\.\.(?:/|$))+")
_RESOLVER_TOKEN = object()


def is_within(root: str, candidate: str) -> bool:
    """Return True when ``candidate`` is ``root`` or lies beneath it.

    Both arguments must already be normalised absolute paths. The check is a
    prefix match that requires a separator after the root, so ``/data-evil``
    is not inside ``/data``.
    """

    if candidate == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return candidate.startswith(prefix)


def neutralize(user_path: str) -> str:
    """Normalise ``user_path`` and drop any leading ``..`` and ``/`` segments.

    Leading parent references are rewritten away instead of rejected:
    ``../../etc/passwd`` becomes ``etc/passwd`` under the root.
    """

    rel = posixpath.normpath(user_path.replace("\\", "/"))
    rel = _LEADING_PARENTS.sub("", rel)
    return rel.lstrip("/")


class ResolvedPath:
    """An absolute path proven to sit inside the storage root."""

    __slots__ = ("_path", "_name")

    def __init__(self, path: str, name: str, *, _token: object = None):
        if _token is not _RESOLVER_TOKEN:
            raise TypeError("ResolvedPath instances are created by PathResolver.resolve()")
        self._path = Path(path)
        self._name = name

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._name

    def __fspath__(self) -> str:
        return str(self._path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedPath):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f"ResolvedPath({str(self._path)!r})"


class PathResolver:
    def __init__(self, root: Path):
        self._root = os.path.normpath(os.path.abspath(root))

    @property
    def root(self) -> ResolvedPath:
        return ResolvedPath(self._root, ".", _token=_RESOLVER_TOKEN)

    def resolve(self, user_path: str | None) -> ResolvedPath | None:
        """Map ``user_path`` onto the root, or return None to reject it."""

        if not user_path:
            return None
        rel = neutralize(user_path)
        candidate = os.path.normpath(os.path.join(self._root, rel))
        if not is_within(self._root, candidate):
            logger.warning("Rejected path %r (resolved to %s)", user_path, candidate)
            return None
        name = Path(os.path.relpath(candidate, self._root)).as_posix()
        return ResolvedPath(candidate, name, _token=_RESOLVER_TOKEN)


__all__ = ["PathResolver", "ResolvedPath", "is_within", "neutralize"]
