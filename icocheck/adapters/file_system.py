#!/usr/bin/env python3
"""Filesystem adapter for controlled IO access."""

from __future__ import annotations

from pathlib import Path


class ShortReadError(OSError):
    """Raised when a file ends before the requested number of bytes."""

    def __init__(self, path: str | Path, expected: int, actual: int):
        self.path = str(path)
        self.expected = expected
        self.actual = actual
        super().__init__(f"unexpected end of file (read {actual} of {expected} bytes)")

    def __str__(self) -> str:
        return str(self.args[0])


class FileSystemAdapter:
    """Provide a minimal filesystem access abstraction."""

    def read_exact(self, path: str | Path, size: int) -> bytes:
        """Read exactly ``size`` bytes, raising ShortReadError on a truncated file."""
        file_path = Path(path)
        with file_path.open("rb") as handle:
            data = b""
            while len(data) < size:
                chunk = handle.read(size - len(data))
                if not chunk:
                    raise ShortReadError(file_path, size, len(data))
                data += chunk
        return data


default_file_system = FileSystemAdapter()
