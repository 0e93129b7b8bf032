from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_PARAMETER = "missing_parameter"
    PATH_REJECTED = "path_rejected"
    NOT_FOUND = "not_found"
    IS_DIRECTORY = "is_directory"
    IO_ERROR = "io_error"


HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.MISSING_PARAMETER: 400,
    ErrorKind.PATH_REJECTED: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.IS_DIRECTORY: 400,
    ErrorKind.IO_ERROR: 500,
}


class StorageError(RuntimeError):
    """Raised when the storage root cannot be created."""
