"""Shared fixtures for file-list-cache tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from file_list_cache.cache.file import FileCache


@pytest.fixture
def cache_paths(tmp_path: Path) -> tuple[Path, Path]:
    """Folder and file as siblings under tmp_path, like most callers set them up."""
    folder = tmp_path / "folder"
    file = tmp_path / "file"
    folder.mkdir()
    file.touch()
    return folder, file


@pytest.fixture
def cache(cache_paths: tuple[Path, Path]) -> FileCache[str]:
    folder, file = cache_paths
    return FileCache[str](folder, file, element_type=str)
