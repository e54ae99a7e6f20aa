"""Settings for building a FileCache.

Philosophy: Simple YAML settings. Apps decide WHERE the settings file lives.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from file_list_cache.codec import FORMATS


@dataclass
class CacheSettings:
    """Location and document format of a cache."""

    folder: Path = Path(".cache")
    file_name: str = "cache.json"
    format: str = "json"
    indent: int = 2
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self.folder = Path(self.folder).expanduser()
        self.format = self.format.strip().lower()
        if self.format == "yml":
            self.format = "yaml"
        if self.format not in FORMATS:
            raise ValueError(f"Unsupported document format '{self.format}' (supported: {', '.join(FORMATS)})")
        if self.indent < 0:
            raise ValueError("indent must be zero or positive")

    @property
    def file_path(self) -> Path:
        return self.folder / self.file_name

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CacheSettings:
        """Create settings from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def load_settings(path: Path) -> CacheSettings:
    """Load cache settings from a YAML file.

    The file may hold the settings at top level or under a ``cache:`` key.

    Args:
        path: Path to the YAML settings file.

    Returns:
        CacheSettings read from the file, or defaults if it doesn't exist.

    Raises:
        yaml.YAMLError: If the file contains invalid YAML.
        ValueError: If a setting has an invalid value.
    """
    if not path.exists():
        return CacheSettings()

    with open(path, encoding="utf-8") as f:
        content = yaml.safe_load(f) or {}

    if not isinstance(content, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")

    section = content.get("cache", content)
    if not isinstance(section, dict):
        raise ValueError(f"'cache' section in {path} must be a mapping")
    return CacheSettings.from_dict(section)
