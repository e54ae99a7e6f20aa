"""
Result models for cache operations.
Uses Pydantic for validation and serialization.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic import Field

if TYPE_CHECKING:
    from file_list_cache.exceptions import CacheError


class CacheErrorKind(str, Enum):
    """Kinds of failure a cache operation can report."""

    IO_FAILURE = "io_failure"
    DECODE_FAILURE = "decode_failure"
    ENCODE_FAILURE = "encode_failure"
    INVALID_INDEX = "invalid_index"
    NOT_FOUND = "not_found"


class CacheResult(BaseModel):
    """Outcome of a mutating cache operation.

    Truthiness follows ``success``, so ``if cache.add(item):`` reads the same
    as checking a boolean flag.
    """

    success: bool = Field(default=True, description="Whether the operation succeeded")
    error_kind: CacheErrorKind | None = Field(
        default=None, description="Failure category if the operation failed"
    )
    message: str | None = Field(default=None, description="Human readable failure detail")

    @classmethod
    def ok(cls) -> CacheResult:
        return cls(success=True)

    @classmethod
    def failure(cls, kind: CacheErrorKind, message: str | None = None) -> CacheResult:
        return cls(success=False, error_kind=kind, message=message)

    @classmethod
    def from_error(cls, error: CacheError) -> CacheResult:
        """Build a failed result from a CacheError, keeping its kind and message."""
        return cls.failure(error.kind, str(error) or None)

    def __bool__(self) -> bool:
        return self.success

    def __str__(self) -> str:
        if self.success:
            return "Success"
        kind = self.error_kind.value if self.error_kind else "unknown"
        return f"Error ({kind}): {self.message}" if self.message else f"Error ({kind})"
