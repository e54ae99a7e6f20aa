"""Tests for codec.py document codecs."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pytest

from file_list_cache.codec import JsonCodec
from file_list_cache.codec import YamlCodec
from file_list_cache.codec import codec_for
from file_list_cache.exceptions import CacheDecodeError
from file_list_cache.exceptions import CacheEncodeError
from file_list_cache.models import CacheErrorKind


@dataclass
class Item:
    name: str
    count: int = 0


class TestJsonCodec:
    """Tests for JsonCodec."""

    def test_field_order_mirrors_element_type(self) -> None:
        """Encoded objects keep the dataclass field names and order."""
        codec = JsonCodec(Item)
        text = codec.encode([Item("a", 1)])
        assert text == '[\n  {\n    "name": "a",\n    "count": 1\n  }\n]'

    def test_decode_returns_element_instances(self) -> None:
        codec = JsonCodec(Item)
        assert codec.decode('[{"name": "a", "count": 2}]') == [Item("a", 2)]

    def test_custom_indent(self) -> None:
        codec = JsonCodec(str, indent=4)
        assert codec.encode(["x"]) == '[\n    "x"\n]'

    def test_unicode_is_kept(self) -> None:
        codec = JsonCodec(str)
        assert codec.decode(codec.encode(["Hello 世界"])) == ["Hello 世界"]

    def test_encode_rejects_wrong_element_type(self) -> None:
        """Elements that don't validate as the element type raise CacheEncodeError."""
        codec = JsonCodec(int)
        with pytest.raises(CacheEncodeError) as exc_info:
            codec.encode([1, "abc"])  # type: ignore[list-item]
        assert exc_info.value.kind == CacheErrorKind.ENCODE_FAILURE

    def test_encode_coerces_to_element_type(self) -> None:
        codec = JsonCodec(float)
        assert codec.encode([1]) == "[\n  1.0\n]"

    def test_non_finite_floats_are_constants(self) -> None:
        codec = JsonCodec(float)
        text = codec.encode([math.nan, math.inf, -math.inf])
        assert text == "[\n  NaN,\n  Infinity,\n  -Infinity\n]"
        decoded = codec.decode(text)
        assert math.isnan(decoded[0])
        assert decoded[1:] == [math.inf, -math.inf]

    @pytest.mark.parametrize(
        "text",
        [
            "not valid json {{{",
            '{"name": "a"}',
            '[{"count": 1}]',
            "",
        ],
    )
    def test_decode_failures(self, text: str) -> None:
        """Malformed text, non-array documents and wrong shapes all raise CacheDecodeError."""
        codec = JsonCodec(Item)
        with pytest.raises(CacheDecodeError) as exc_info:
            codec.decode(text)
        assert exc_info.value.kind == CacheErrorKind.DECODE_FAILURE


class TestYamlCodec:
    """Tests for YamlCodec."""

    def test_encode_block_style(self) -> None:
        codec = YamlCodec(Item)
        assert codec.encode([Item("a", 1)]) == "- name: a\n  count: 1\n"

    def test_decode(self) -> None:
        codec = YamlCodec(Item)
        assert codec.decode("- name: a\n  count: 3\n") == [Item("a", 3)]

    def test_invalid_yaml(self) -> None:
        codec = YamlCodec(str)
        with pytest.raises(CacheDecodeError, match="not valid YAML"):
            codec.decode("key: [unclosed")

    def test_mapping_is_not_a_list(self) -> None:
        codec = YamlCodec(str)
        with pytest.raises(CacheDecodeError, match="not a YAML list"):
            codec.decode("key: value\n")

    def test_encode_rejects_wrong_element_type(self) -> None:
        codec = YamlCodec(int)
        with pytest.raises(CacheEncodeError, match="not of type int"):
            codec.encode(["abc"])  # type: ignore[list-item]


class TestCodecFor:
    """Tests for codec_for()."""

    def test_json(self) -> None:
        assert isinstance(codec_for(str, "json"), JsonCodec)

    @pytest.mark.parametrize("fmt", ["yaml", "YML", " Yaml "])
    def test_yaml_aliases(self, fmt: str) -> None:
        assert isinstance(codec_for(str, fmt), YamlCodec)

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="supported: json, yaml"):
            codec_for(str, "xml")
