"""
Exceptions raised by podgrab.

Every error carries a ``kind`` so callers can branch on the category
without comparing exception identity, and a ``context`` dict with the
values that were involved (URL, path, podcast name).
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Closed set of error categories."""

    FETCH = "fetch"
    STORAGE = "storage"
    PARSE = "parse"
    EMPTY_ARCHIVE = "empty_archive"
    INVALID_URL = "invalid_url"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    RESERVED_NAME = "reserved_name"


class PodgrabError(Exception):
    """Base exception for all podgrab errors."""

    kind: ErrorKind

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message


class FetchError(PodgrabError):
    """Network failure or non-success HTTP response."""

    kind = ErrorKind.FETCH


class StorageError(PodgrabError):
    """Filesystem create, list, read or write failure."""

    kind = ErrorKind.STORAGE


class ParseError(PodgrabError):
    """Malformed feed document."""

    kind = ErrorKind.PARSE


class EmptyArchiveError(PodgrabError):
    """Feed snapshot archive has no entries."""

    kind = ErrorKind.EMPTY_ARCHIVE


class InvalidURLError(PodgrabError):
    """Episode media URL cannot be used for a download."""

    kind = ErrorKind.INVALID_URL


class NotFoundError(PodgrabError):
    """Podcast is not registered."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(PodgrabError):
    """Podcast name is already registered."""

    kind = ErrorKind.ALREADY_EXISTS


class ReservedNameError(PodgrabError):
    """Podcast name collides with the reserved batch name."""

    kind = ErrorKind.RESERVED_NAME
