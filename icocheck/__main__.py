#!/usr/bin/env python3
"""
Run icocheck as ``python -m icocheck``.
"""

from icocheck.cli_main import cli


def main(argv: list[str] | None = None) -> int:
    """Run the click command on ``argv`` (default: sys.argv) and return its exit code."""
    try:
        cli.main(args=argv, prog_name="icocheck")
    except SystemExit as exc:
        # click and ValidateCommand both finish through sys.exit
        return exc.code if isinstance(exc.code, int) else 1 if exc.code else 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
