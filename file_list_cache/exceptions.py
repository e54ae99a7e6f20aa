"""Exception hierarchy for file-list-cache.

These are raised by the codec and the cache's private helpers. The public
methods of FileCache catch them and report a CacheResult instead, so callers
only see them when they use a codec directly.
"""

from __future__ import annotations

from file_list_cache.models import CacheErrorKind


class CacheError(Exception):
    """Base exception for all cache errors.

    Attributes:
        kind: The CacheErrorKind reported when this error is turned into a result.
    """

    kind: CacheErrorKind = CacheErrorKind.IO_FAILURE


class CacheIOError(CacheError):
    """Backing file or folder could not be read or written."""

    kind = CacheErrorKind.IO_FAILURE


class CacheDecodeError(CacheError):
    """Stored document is malformed or does not hold a list of the element type."""

    kind = CacheErrorKind.DECODE_FAILURE


class InvalidIndexError(CacheError):
    """Index is outside the bounds of the stored list."""

    kind = CacheErrorKind.INVALID_INDEX


class CacheNotFoundError(CacheError):
    """Backing folder or file is missing, or the file holds no data."""

    kind = CacheErrorKind.NOT_FOUND


class CacheEncodeError(CacheError):
    """Elements cannot be written as a document that reads back as the element type."""

    kind = CacheErrorKind.ENCODE_FAILURE
