"""File List Cache - a homogeneous list persisted in a single file.

One mechanism: FileCache keeps an ordered list of elements of one type as a
pretty-printed document (JSON or YAML) in one file, and rewrites the whole
document on every change.

Philosophy: Mechanism not policy. Apps decide WHERE the file lives and WHAT
is stored; the cache only appends, reads, removes and clears.
"""

from __future__ import annotations

# Core classes
from file_list_cache.cache.file import FileCache

# Protocols
from file_list_cache.cache.protocol import ListCacheProtocol

# Codecs
from file_list_cache.codec import DocumentCodec
from file_list_cache.codec import JsonCodec
from file_list_cache.codec import YamlCodec
from file_list_cache.codec import codec_for

# Configuration
from file_list_cache.config import CacheSettings
from file_list_cache.config import load_settings

# Exceptions
from file_list_cache.exceptions import CacheDecodeError
from file_list_cache.exceptions import CacheEncodeError
from file_list_cache.exceptions import CacheError
from file_list_cache.exceptions import CacheIOError
from file_list_cache.exceptions import CacheNotFoundError
from file_list_cache.exceptions import InvalidIndexError

# Results
from file_list_cache.models import CacheErrorKind
from file_list_cache.models import CacheResult

__all__ = [
    "FileCache",
    "ListCacheProtocol",
    "DocumentCodec",
    "JsonCodec",
    "YamlCodec",
    "codec_for",
    "CacheSettings",
    "load_settings",
    "CacheError",
    "CacheIOError",
    "CacheDecodeError",
    "CacheEncodeError",
    "CacheNotFoundError",
    "InvalidIndexError",
    "CacheErrorKind",
    "CacheResult",
]
