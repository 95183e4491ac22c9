"""Typed result models for ICO validation outcomes."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class ValidationStatus(Enum):
    """Verdicts produced by the ICO validator"""

    VALID = "valid"  # Header matches the ICO magic
    INVALID = "invalid"  # Header read in full but does not match
    IO_FAILURE = "io_failure"  # Open or read failed


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a single file."""

    path: str
    status: ValidationStatus
    header: bytes | None = None
    cause: str | None = None

    @classmethod
    def valid(cls, path: str, header: bytes) -> ValidationResult:
        return cls(path=path, status=ValidationStatus.VALID, header=header)

    @classmethod
    def invalid(cls, path: str, header: bytes) -> ValidationResult:
        return cls(path=path, status=ValidationStatus.INVALID, header=header)

    @classmethod
    def io_failure(cls, path: str, cause: str) -> ValidationResult:
        return cls(path=path, status=ValidationStatus.IO_FAILURE, cause=cause)

    @property
    def is_valid(self) -> bool:
        return self.status is ValidationStatus.VALID

    @property
    def signature(self) -> str | None:
        """Header bytes as space separated hex pairs, e.g. ``00 00 01 00``."""
        if self.header is None:
            return None
        return " ".join(f"{byte:02x}" for byte in self.header)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        data["header"] = self.signature
        return data
