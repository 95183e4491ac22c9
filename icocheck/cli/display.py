#!/usr/bin/env python3
"""
icocheck CLI Display Module

Rich consoles for the verdict lines. Success is written to stdout, every
failure to stderr, one line each.
"""

import io
import sys
from typing import IO, cast

from rich.console import Console
from rich.markup import escape

from ..domain.results import ValidationResult, ValidationStatus

CHECK_MARK = "✓"
CROSS_MARK = "✗"


class _StreamProxy:
    """Forward writes to sys.stdout/sys.stderr as they are at write time."""

    def __init__(self, name: str):
        self._name = name

    @property
    def _stream(self) -> IO[str]:
        return cast(IO[str], getattr(sys, self._name))

    def write(self, data: str) -> int:
        return self._stream.write(data)

    def flush(self) -> None:
        self._stream.flush()

    def isatty(self) -> bool:
        return self._stream.isatty()

    @property
    def encoding(self) -> str:
        return getattr(self._stream, "encoding", None) or "utf-8"

    @property
    def errors(self) -> str:
        return getattr(self._stream, "errors", None) or "strict"


def _make_console(stream_name: str) -> Console:
    return Console(
        file=cast(IO[str], _StreamProxy(stream_name)),
        color_system=None,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


console = _make_console("stdout")
error_console = _make_console("stderr")


def ensure_utf8_streams() -> None:
    """Switch stdout/stderr to UTF-8 so the status glyphs are never degraded."""
    for name in ("stdout", "stderr"):
        stream = getattr(sys, name)
        encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
        if encoding == "utf8" or not isinstance(stream, io.TextIOWrapper):
            continue
        try:
            stream.reconfigure(encoding="utf-8")
        except (ValueError, io.UnsupportedOperation):
            # Stream already in use with an incompatible state
            continue


def valid_line(path: str) -> str:
    return f"{CHECK_MARK} {path} is a valid Windows ICO file"


def invalid_line(path: str) -> str:
    return f"{CROSS_MARK} {path} is not a valid ICO file!"


def io_failure_line(path: str, cause: str) -> str:
    return f"Error checking {path}: {cause}"


def _write_line(target: Console, line: str) -> None:
    # Bypass rich rendering: tabs and control characters in paths stay verbatim
    target.file.write(line + "\n")
    target.file.flush()


def print_error(message: str, target: Console | None = None) -> None:
    (target or error_console).print(f"[red]Error: {escape(message)}[/red]")


def print_result(
    result: ValidationResult,
    out: Console | None = None,
    err: Console | None = None,
) -> None:
    """Render a ValidationResult as its single report line."""
    out = out or console
    err = err or error_console

    if result.status is ValidationStatus.VALID:
        _write_line(out, valid_line(result.path))
    elif result.status is ValidationStatus.INVALID:
        _write_line(err, invalid_line(result.path))
    else:
        _write_line(err, io_failure_line(result.path, result.cause or "unknown error"))


def handle_main_error(e: Exception, verbose: bool) -> None:
    """
    Handle errors in main function.

    Args:
        e: Exception that occurred
        verbose: Enable verbose error output
    """
    print_error(str(e))
    if verbose:
        import traceback

        traceback.print_exc()
    sys.exit(1)
