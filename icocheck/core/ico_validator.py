#!/usr/bin/env python3
"""
icocheck ICO Validator - Magic byte validation for Windows icon resources

This module provides the IcoValidator class which decides whether a file
starts with the ICO container magic (00 00 01 00). Only the first four bytes
are inspected; the icon directory and image payloads are never parsed.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from pathlib import Path

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..domain.results import ValidationResult
from ..utils.logger import get_logger
from ..utils.magic_patterns import identify_header
from .constants import ICO_HEADER_SIZE_BYTES, ICO_MAGIC

logger = get_logger(__name__)


class IcoValidator:
    """
    Validates that a file is a Windows ICO resource.

    The verdict is VALID if and only if the first four bytes equal the ICO
    magic. A readable header with any other content is INVALID (this includes
    the CUR cursor magic 00 00 02 00). Any failure to open or fully read the
    header, including a file shorter than four bytes, is reported as
    IO_FAILURE with the underlying error text and is never downgraded to
    INVALID.

    Attributes:
        file_path: Pathlib Path object for the file
        filename: String representation of the file path
    """

    def __init__(
        self,
        filename: str | Path,
        file_system: FileSystemAdapter | None = None,
    ):
        """
        Initialize IcoValidator with a file path.

        Args:
            filename: Path to the file to validate (string or Path object)
            file_system: Adapter used for the header read
        """
        self.filename = str(filename)
        self.file_path = Path(filename)
        self._fs = file_system or default_file_system

    def validate(self) -> ValidationResult:
        """
        Read the header and classify the file.

        Returns:
            ValidationResult with status VALID, INVALID or IO_FAILURE
        """
        try:
            header = self.read_header()
        except OSError as e:
            logger.info(f"Cannot read header of {self.filename}: {e}")
            return ValidationResult.io_failure(self.filename, str(e))

        if header == ICO_MAGIC:
            logger.info(f"{self.filename}: signature {_hex(header)} matches ICO magic")
            return ValidationResult.valid(self.filename, header)

        self._log_rejection(header)
        return ValidationResult.invalid(self.filename, header)

    def read_header(self) -> bytes:
        """
        Read exactly the ICO header prefix.

        Returns:
            The first four bytes of the file

        Raises:
            OSError: If the file cannot be opened or ends early
        """
        return self._fs.read_exact(self.file_path, ICO_HEADER_SIZE_BYTES)

    def _log_rejection(self, header: bytes) -> None:
        logger.info(
            f"{self.filename}: invalid ICO signature, expected {_hex(ICO_MAGIC)}, "
            f"found {_hex(header)}"
        )
        match = identify_header(header)
        if match is None:
            return

        name, pattern = match
        logger.info(f"{self.filename}: header looks like {pattern['description']} ({name})")
        if pattern.get("hint"):
            logger.info(f"{self.filename}: {pattern['hint']}")


def _hex(data: bytes) -> str:
    return " ".join(f"{byte:02x}" for byte in data)


def validate(path: str | Path) -> ValidationResult:
    """Validate ``path`` and return its ValidationResult."""
    return IcoValidator(path).validate()


def is_valid_ico(path: str | Path) -> bool:
    """
    Check whether ``path`` starts with the ICO magic.

    Unlike validate(), I/O faults are raised to the caller.

    Raises:
        OSError: If the file cannot be opened or holds fewer than four bytes
    """
    return IcoValidator(path).read_header() == ICO_MAGIC


__all__ = ["IcoValidator", "is_valid_ico", "validate"]
