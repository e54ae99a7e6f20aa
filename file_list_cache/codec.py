"""Document codecs for the backing file.

A codec turns the whole list of elements into a pretty-printed document and
back. Both implementations validate through a pydantic ``TypeAdapter`` built
for ``list[E]``, so any element type pydantic understands (str, int,
dataclasses, BaseModel subclasses, dicts, ...) can be stored. Field names and
order on disk mirror the element type; no envelope is added.
"""

from __future__ import annotations

from typing import Any
from typing import Generic
from typing import Protocol
from typing import TypeVar

import yaml
from pydantic import ConfigDict
from pydantic import TypeAdapter
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from file_list_cache.exceptions import CacheDecodeError
from file_list_cache.exceptions import CacheEncodeError

E = TypeVar("E")

FORMATS = ("json", "yaml")


class DocumentCodec(Protocol[E]):
    """Protocol for encoding a list of elements to text and back."""

    def encode(self, items: list[E]) -> str:
        """Encode the full list as document text.

        Raises:
            CacheEncodeError: If an element is not of the element type, cannot be
                serialized, or would not read back.
        """
        ...

    def decode(self, text: str) -> list[E]:
        """Decode document text into a list of elements.

        Raises:
            CacheDecodeError: If the text is malformed or not a list of E.
        """
        ...


class _AdapterCodec(Generic[E]):
    def __init__(self, element_type: Any = Any, indent: int = 2) -> None:
        self.element_type = element_type
        self.indent = indent
        # NaN and infinities are written as constants so they read back as floats.
        self._adapter: TypeAdapter[list[E]] = TypeAdapter(
            list[element_type], config=ConfigDict(ser_json_inf_nan="constants")
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(element_type={self._type_name}, indent={self.indent})"

    @property
    def _type_name(self) -> str:
        return getattr(self.element_type, "__name__", repr(self.element_type))

    def _validated(self, items: list[E]) -> list[E]:
        """Coerce items to the element type before writing (e.g. int to float)."""
        try:
            return self._adapter.validate_python(items)
        except ValidationError as e:
            raise CacheEncodeError(f"Elements are not of type {self._type_name}: {e}") from e

    def _read_back(self, text: str) -> str:
        """Return text if it decodes, so nothing is written that can't be read again."""
        try:
            self.decode(text)
        except CacheDecodeError as e:
            raise CacheEncodeError(f"Encoded document does not read back as {self._type_name}: {e}") from e
        return text

    def decode(self, text: str) -> list[E]:
        raise NotImplementedError


class JsonCodec(_AdapterCodec[E]):
    """Pretty-printed JSON array."""

    def encode(self, items: list[E]) -> str:
        try:
            raw = self._adapter.dump_json(self._validated(items), indent=self.indent, warnings="error")
        except PydanticSerializationError as e:
            raise CacheEncodeError(f"Cannot encode elements as JSON: {e}") from e
        return self._read_back(raw.decode("utf-8"))

    def decode(self, text: str) -> list[E]:
        try:
            return self._adapter.validate_json(text)
        except ValidationError as e:
            raise CacheDecodeError(f"Document is not a JSON list of the element type: {e}") from e


class YamlCodec(_AdapterCodec[E]):
    """Block-style YAML sequence."""

    def encode(self, items: list[E]) -> str:
        try:
            data = self._adapter.dump_python(self._validated(items), mode="json", warnings="error")
        except PydanticSerializationError as e:
            raise CacheEncodeError(f"Cannot encode elements as YAML: {e}") from e
        text = yaml.safe_dump(
            data,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            indent=self.indent,
        )
        return self._read_back(text)

    def decode(self, text: str) -> list[E]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise CacheDecodeError(f"Document is not valid YAML: {e}") from e
        try:
            return self._adapter.validate_python(data)
        except ValidationError as e:
            raise CacheDecodeError(f"Document is not a YAML list of the element type: {e}") from e


def codec_for(element_type: Any = Any, fmt: str = "json", indent: int = 2) -> DocumentCodec[Any]:
    """Build the codec for a document format.

    Args:
        element_type: Type of the stored elements.
        fmt: Format name, one of FORMATS.
        indent: Indentation width for the pretty-printed document.

    Returns:
        A codec for ``list[element_type]``.

    Raises:
        ValueError: If fmt is not a supported format.
    """
    normalized = fmt.strip().lower()
    if normalized == "json":
        return JsonCodec(element_type, indent=indent)
    if normalized in ("yaml", "yml"):
        return YamlCodec(element_type, indent=indent)
    raise ValueError(f"Unsupported document format '{fmt}' (supported: {', '.join(FORMATS)})")
