from __future__ import annotations

import pytest

from icocheck.domain.results import ValidationResult, ValidationStatus
from icocheck.utils.magic_patterns import identify_header


@pytest.mark.unit
def test_result_to_dict() -> None:
    result = ValidationResult.invalid("icon.ico", b"\x89PNG")
    assert result.to_dict() == {
        "path": "icon.ico",
        "status": "invalid",
        "header": "89 50 4e 47",
        "cause": None,
    }


@pytest.mark.unit
def test_io_failure_result_has_no_signature() -> None:
    result = ValidationResult.io_failure("icon.ico", "boom")
    assert result.signature is None
    assert not result.is_valid
    assert result.status is ValidationStatus.IO_FAILURE


@pytest.mark.unit
@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (b"\x00\x00\x01\x00", "ICO"),
        (b"\x00\x00\x02\x00", "CUR"),
        (b"\x89PNG", "PNG"),
        (b"BM6\x00", "BMP"),
        (b"\xff\xd8\xff\xe0", "JPEG"),
        (b"icns", "ICNS"),
        (b"MZ\x90\x00", "PE"),
    ],
)
def test_identify_header_known_formats(header: bytes, expected: str) -> None:
    match = identify_header(header)
    assert match is not None
    assert match[0] == expected


@pytest.mark.unit
def test_identify_header_unknown() -> None:
    assert identify_header(b"\x12\x34\x56\x78") is None
