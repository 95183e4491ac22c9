#!/usr/bin/env python3
"""
icocheck Core Constants - ICO header layout and process exit codes

This module contains the constants used by the ICO validator and the
command line reporter.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# ICO Header Constants
# =============================================================================
# ICONDIR starts with a reserved WORD (always 0) followed by a little-endian
# type WORD: 1 for icons, 2 for cursors.
ICO_RESERVED = b"\x00\x00"
ICO_TYPE_ICON = b"\x01\x00"
ICO_TYPE_CURSOR = b"\x02\x00"

ICO_MAGIC = ICO_RESERVED + ICO_TYPE_ICON  # 00 00 01 00
CUR_MAGIC = ICO_RESERVED + ICO_TYPE_CURSOR  # 00 00 02 00
ICO_HEADER_SIZE_BYTES = len(ICO_MAGIC)

# =============================================================================
# Target Constants
# =============================================================================
# Icon asset consumed by the Windows resource compiler, relative to the
# directory the build is launched from.
DEFAULT_ICON_PATH = "src-tauri/icons/icon.ico"

# =============================================================================
# Exit Codes
# =============================================================================
EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_IO_FAILURE = 1
