"""Tests for config.py settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from file_list_cache.config import CacheSettings
from file_list_cache.config import load_settings


class TestCacheSettings:
    """Tests for CacheSettings."""

    def test_defaults(self) -> None:
        settings = CacheSettings()
        assert settings.folder == Path(".cache")
        assert settings.file_path == Path(".cache") / "cache.json"
        assert settings.format == "json"
        assert settings.indent == 2
        assert settings.encoding == "utf-8"

    def test_normalizes_folder_and_format(self) -> None:
        settings = CacheSettings(folder="data", format="YML")  # type: ignore[arg-type]
        assert settings.folder == Path("data")
        assert settings.format == "yaml"

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unsupported document format"):
            CacheSettings(format="toml")

    def test_rejects_negative_indent(self) -> None:
        with pytest.raises(ValueError, match="indent"):
            CacheSettings(indent=-1)

    def test_from_dict_ignores_unknown_keys(self) -> None:
        settings = CacheSettings.from_dict({"file_name": "x.json", "ttl": 30})
        assert settings.file_name == "x.json"


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_settings(tmp_path / "nope.yaml") == CacheSettings()

    def test_cache_section(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            "cache:\n"
            f"  folder: {tmp_path / 'store'}\n"
            "  file_name: notes.yaml\n"
            "  format: yaml\n"
            "  indent: 4\n"
        )

        settings = load_settings(path)

        assert settings.file_path == tmp_path / "store" / "notes.yaml"
        assert settings.format == "yaml"
        assert settings.indent == 4

    def test_flat_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("file_name: items.json\n")
        assert load_settings(path).file_name == "items.json"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert load_settings(path) == CacheSettings()

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("cache: [unclosed")
        with pytest.raises(yaml.YAMLError):
            load_settings(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_settings(path)
