"""Pytest configuration for shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from icocheck.core.constants import CUR_MAGIC, ICO_MAGIC

# 6-byte ICONDIR for a single 16x16 entry
ICO_HEADER = ICO_MAGIC + b"\x01\x00"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast, in-process tests")


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Return a factory writing ``data`` to ``tmp_path / name``."""

    def _make(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def ico_file(make_file) -> Path:
    return make_file("icon.ico", ICO_HEADER + b"\x10\x10")


@pytest.fixture
def cur_file(make_file) -> Path:
    return make_file("pointer.cur", CUR_MAGIC)


@pytest.fixture
def png_file(make_file) -> Path:
    return make_file("icon.png", PNG_SIGNATURE + b"\x00\x00\x00\rIHDR")
