#!/usr/bin/env python3
"""Magic byte patterns used to explain a rejected icon header."""

from typing import Any

from ..core.constants import CUR_MAGIC, ICO_MAGIC

# Only the first four bytes of the target are ever read, so every signature
# here must be decidable from that prefix.
MAGIC_PATTERNS: dict[str, dict[str, Any]] = {
    "ICO": {
        "signatures": [ICO_MAGIC],
        "description": "Windows Icon",
        "hint": None,
    },
    "CUR": {
        "signatures": [CUR_MAGIC],
        "description": "Windows Cursor",
        "hint": "cursor resources are not accepted as application icons",
    },
    "PNG": {
        "signatures": [b"\x89PNG"],
        "description": "PNG Image",
        "hint": "convert the PNG into a multi-size ICO container",
    },
    "BMP": {
        "signatures": [b"BM"],
        "description": "Windows Bitmap",
        "hint": "convert the bitmap into an ICO container",
    },
    "GIF": {
        "signatures": [b"GIF8"],
        "description": "GIF Image",
        "hint": "convert the GIF into an ICO container",
    },
    "JPEG": {
        "signatures": [b"\xff\xd8\xff"],
        "description": "JPEG Image",
        "hint": "convert the JPEG into an ICO container",
    },
    "WEBP": {
        "signatures": [b"RIFF"],
        "description": "RIFF container (WebP)",
        "hint": "convert the image into an ICO container",
    },
    "SVG": {
        "signatures": [b"<svg", b"<?xm"],
        "description": "SVG / XML document",
        "hint": "rasterize the SVG and pack it into an ICO container",
    },
    "ICNS": {
        "signatures": [b"icns"],
        "description": "Apple Icon Image",
        "hint": "ICNS is the macOS icon format; Windows needs ICO",
    },
    "ZIP": {
        "signatures": [b"PK\x03\x04"],
        "description": "ZIP Archive",
        "hint": None,
    },
    "PE": {
        "signatures": [b"MZ"],
        "description": "Windows PE Executable",
        "hint": None,
    },
}


def identify_header(header: bytes) -> tuple[str, dict[str, Any]] | None:
    """Return the (name, pattern) of the first known format whose signature prefixes ``header``."""
    for name, pattern in MAGIC_PATTERNS.items():
        for signature in pattern["signatures"]:
            if header.startswith(signature):
                return name, pattern
    return None
