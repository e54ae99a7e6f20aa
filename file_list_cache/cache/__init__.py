"""Cache protocols and implementations."""

from .file import FileCache
from .protocol import ListCacheProtocol

__all__ = [
    "FileCache",
    "ListCacheProtocol",
]
