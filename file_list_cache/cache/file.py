"""File-backed list cache implementation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING
from typing import Any
from typing import Generic
from typing import TypeVar

from file_list_cache.codec import DocumentCodec
from file_list_cache.codec import codec_for
from file_list_cache.exceptions import CacheError
from file_list_cache.exceptions import CacheIOError
from file_list_cache.exceptions import CacheNotFoundError
from file_list_cache.exceptions import InvalidIndexError
from file_list_cache.models import CacheErrorKind
from file_list_cache.models import CacheResult

if TYPE_CHECKING:
    from file_list_cache.config import CacheSettings

E = TypeVar("E")


class FileCache(Generic[E]):
    """Ordered list of elements persisted as one document in one file.

    Every operation reads or rewrites the whole file; nothing is held in
    memory between calls, so out-of-band changes to the file are always seen.
    A zero-length file means "no data" and reads back as None, which is
    distinct from a stored empty list.

    Not safe for concurrent writers: add, remove and remove_all are plain
    read-modify-write sequences without locking, and a failed write can leave
    the file truncated.

    Example:
        cache = FileCache[str](Path("data"), Path("data/names.json"), element_type=str)
        cache.add("alice")
        cache.get()  # ["alice"]
    """

    def __init__(
        self,
        folder: Path | str | None,
        file: Path | str | None,
        *,
        element_type: Any = Any,
        codec: DocumentCodec[E] | None = None,
        fmt: str = "json",
        indent: int = 2,
        encoding: str = "utf-8",
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the cache and make sure its folder and file exist.

        Creation failures are logged, not raised. Callers that need them to be
        fatal should check is_valid_path() afterwards.

        Args:
            folder: Directory of the cache. Created with parents if missing.
            file: Backing file. Created empty if missing; its parent must exist.
            element_type: Type of the stored elements, fixed for this cache.
            codec: Codec to use instead of the one selected by fmt.
            fmt: Document format, "json" or "yaml".
            indent: Indentation width of the pretty-printed document.
            encoding: Text encoding of the backing file.
            logger: Logger for non-fatal failures. Defaults to this module's logger.
        """
        self.folder = folder
        self.file = file
        self.element_type = element_type
        self.codec: DocumentCodec[E] = codec or codec_for(element_type, fmt, indent)
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

        if not self.is_folder_present():
            self.create_folder()
        if not self.is_file_present():
            self.create_file()

    @classmethod
    def from_settings(
        cls,
        settings: CacheSettings,
        *,
        element_type: Any = Any,
        logger: logging.Logger | None = None,
    ) -> FileCache[Any]:
        """Create a cache from CacheSettings."""
        return cls(
            settings.folder,
            settings.file_path,
            element_type=element_type,
            fmt=settings.format,
            indent=settings.indent,
            encoding=settings.encoding,
            logger=logger,
        )

    @property
    def folder(self) -> Path | None:
        return self._folder

    @folder.setter
    def folder(self, value: Path | str | None) -> None:
        self._folder = Path(value) if value is not None else None

    @property
    def file(self) -> Path | None:
        return self._file

    @file.setter
    def file(self, value: Path | str | None) -> None:
        self._file = Path(value) if value is not None else None

    # ----- List operations -----

    def add(self, element: E) -> CacheResult:
        """Append an element, rewriting the whole document.

        Args:
            element: Element to store.

        Returns:
            Successful result, or a failed result with kind not_found,
            decode_failure, encode_failure or io_failure. An element that is
            not of the element type is rejected and nothing is written.
        """
        try:
            if not self.is_file_present():
                raise CacheNotFoundError(f"Cache file {self.file} does not exist")
            if self._file_size() == 0:
                items: list[E] = [element]
            else:
                items = self._read_document()
                items.append(element)
            self._write_document(items)
        except CacheError as e:
            self.logger.error(f"Failed to add element to {self.file}: {e}")
            return CacheResult.from_error(e)
        return CacheResult.ok()

    def get(self) -> list[E] | None:
        """Read every stored element.

        Returns:
            Elements in insertion order, or None if the folder or file is
            missing, the file is empty, or the document can't be read.
        """
        try:
            return self._read_items()
        except CacheNotFoundError:
            return None
        except CacheError as e:
            self.logger.error(f"Failed to read {self.file}: {e}")
            return None

    def remove(self, index: int) -> CacheResult:
        """Remove the element at index; later elements shift down by one.

        Args:
            index: Zero-based position. Negative indexes are rejected.

        Returns:
            Successful result, or a failed result with kind invalid_index,
            not_found, decode_failure, encode_failure or io_failure. The stored
            list is left unchanged on failure.
        """
        try:
            items = self._read_items()
            if not 0 <= index < len(items):
                raise InvalidIndexError(f"Index {index} out of range for {len(items)} element(s)")
            del items[index]
            self._write_document(items)
        except InvalidIndexError as e:
            self.logger.warning(f"Rejected remove on {self.file}: {e}")
            return CacheResult.from_error(e)
        except CacheNotFoundError as e:
            return CacheResult.from_error(e)
        except CacheError as e:
            self.logger.error(f"Failed to remove element from {self.file}: {e}")
            return CacheResult.from_error(e)
        return CacheResult.ok()

    def remove_all(self) -> CacheResult:
        """Delete the backing file and recreate it empty.

        Does nothing and reports not_found when the folder or file is missing.
        """
        if not self.is_valid_path():
            return CacheResult.failure(CacheErrorKind.NOT_FOUND, f"Cache path {self.file} does not exist")
        self.delete()
        self.create_file()
        if self.is_file_present() and self._file_size_or_none() == 0:
            return CacheResult.ok()
        return CacheResult.failure(CacheErrorKind.IO_FAILURE, f"Could not reset cache file {self.file}")

    def is_empty(self) -> bool:
        """Check whether nothing is stored (missing file, empty file or empty list)."""
        return not self.get()

    def __len__(self) -> int:
        items = self.get()
        return len(items) if items else 0

    def __iter__(self) -> Iterator[E]:
        return iter(self.get() or [])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(folder={self.folder!r}, file={self.file!r}, codec={self.codec!r})"

    # ----- Filesystem predicates and accessors -----

    def is_file_present(self) -> bool:
        return self.file is not None and self.file.exists()

    def is_folder_present(self) -> bool:
        return self.folder is not None and self.folder.exists()

    def is_valid_path(self) -> bool:
        """Check that both the folder and the file exist."""
        return self.is_folder_present() and self.is_file_present()

    @property
    def file_path(self) -> Path | None:
        return self.file

    @property
    def file_name(self) -> str | None:
        return self.file.name if self.file is not None else None

    @property
    def folder_path(self) -> Path | None:
        return self.folder

    @property
    def folder_name(self) -> str | None:
        return self.folder.name if self.folder is not None else None

    def create_file(self) -> bool:
        """Create an empty backing file if it doesn't exist.

        Returns:
            True if the file was created, False if it already existed or
            couldn't be created.
        """
        if self.file is None or self.is_file_present():
            return False
        try:
            self.file.touch(exist_ok=False)
        except OSError as e:
            self.logger.error(f"Failed to create cache file {self.file}: {e}")
            return False
        self.logger.debug(f"Created cache file {self.file}")
        return True

    def create_folder(self) -> bool:
        """Create the cache folder, including parents, if it doesn't exist.

        Returns:
            True if the folder was created, False if it already existed or
            couldn't be created.
        """
        if self.folder is None or self.is_folder_present():
            return False
        try:
            self.folder.mkdir(parents=True)
        except OSError as e:
            self.logger.error(f"Failed to create cache folder {self.folder}: {e}")
            return False
        self.logger.debug(f"Created cache folder {self.folder}")
        return True

    def delete(self) -> bool:
        """Delete the backing file.

        Returns:
            True if the file was deleted, False if it didn't exist or
            couldn't be deleted.
        """
        if self.file is None or not self.is_file_present():
            return False
        try:
            self.file.unlink()
        except OSError as e:
            self.logger.error(f"Failed to delete cache file {self.file}: {e}")
            return False
        return True

    # ----- Document I/O -----

    def _backing_file(self) -> Path:
        if self.file is None:
            raise CacheNotFoundError("No cache file is set")
        return self.file

    def _file_size(self) -> int:
        file = self._backing_file()
        try:
            return file.stat().st_size
        except OSError as e:
            raise CacheIOError(f"Cannot stat {file}: {e}") from e

    def _file_size_or_none(self) -> int | None:
        try:
            return self._file_size()
        except CacheIOError:
            return None

    def _read_items(self) -> list[E]:
        """Read the stored list, treating a missing path or empty file as not found."""
        if not self.is_valid_path():
            raise CacheNotFoundError(f"Cache path {self.file} does not exist")
        if self._file_size() == 0:
            raise CacheNotFoundError(f"Cache file {self.file} holds no data")
        return self._read_document()

    def _read_document(self) -> list[E]:
        file = self._backing_file()
        try:
            text = file.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise CacheIOError(f"Cannot read {file}: {e}") from e
        return self.codec.decode(text)

    def _write_document(self, items: list[E]) -> None:
        file = self._backing_file()
        text = self.codec.encode(items)
        try:
            file.write_text(text, encoding=self.encoding)
        except (OSError, UnicodeEncodeError) as e:
            raise CacheIOError(f"Cannot write {file}: {e}") from e
