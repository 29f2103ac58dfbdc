"""
Pytest configuration and fixtures for tidy_tools tests.
"""

import io
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict

import pytest

FIXED_TIME = datetime(2024, 1, 15, 9, 30, 0)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Create an empty source directory."""
    directory = tmp_path / "inbox"
    directory.mkdir()
    return directory


@pytest.fixture
def make_files(source_dir: Path) -> Callable[[Dict[str, int]], Dict[str, Path]]:
    """Create files of given sizes in the source directory."""

    def _make(files: Dict[str, int]) -> Dict[str, Path]:
        created = {}
        for name, size in files.items():
            path = source_dir / name
            path.write_bytes(b"x" * size)
            created[name] = path
        return created

    return _make


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory run log sink."""
    return io.StringIO()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns the same instant."""
    return lambda: FIXED_TIME
