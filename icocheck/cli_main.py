#!/usr/bin/env python3
"""
icocheck CLI - Command Line Interface

This module provides the Click-based CLI entry point for icocheck. Command
execution logic lives in the command classes under icocheck.cli.commands.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import sys
from dataclasses import dataclass
from typing import Any

import click

from .cli.commands import CommandContext, ValidateCommand, VersionCommand
from .cli.display import ensure_utf8_streams, error_console, handle_main_error
from .config import Config


@dataclass
class CLIArgs:
    path: str | None
    verbose: bool
    quiet: bool
    config: str | None
    version: bool


def main(**kwargs: Any):
    """
    icocheck - verify that a file is a Windows ICO resource.
    """
    ensure_utf8_streams()
    args = CLIArgs(**kwargs)
    try:
        run_cli(args)
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Validation interrupted by user[/yellow]")
        sys.exit(1)

    except Exception as e:
        handle_main_error(e, args.verbose)


@click.command()
@click.argument("path", type=click.Path(), required=False)
@click.option("-v", "--verbose", is_flag=True, help="Log header signature and format hints to stderr")
@click.option("--quiet", is_flag=True, help="Only log errors")
@click.option("--config", type=click.Path(dir_okay=False), help="Custom JSON config file path")
@click.option("--version", is_flag=True, help="Show version information and exit")
def cli(**kwargs: Any):
    """Check that PATH (default: the configured icon asset) starts with the ICO magic bytes."""
    main(**kwargs)


def run_cli(args: CLIArgs) -> None:
    """Primary CLI workflow separated for clarity and testability."""
    context = _build_context(args.config, args.verbose, args.quiet)

    if args.version:
        sys.exit(VersionCommand(context).execute({}))

    command = ValidateCommand(context)
    exit_code = command.execute({"path": args.path})
    sys.exit(exit_code)


def _build_context(config_path: str | None, verbose: bool, quiet: bool) -> CommandContext:
    """Construct a CommandContext with configuration and logging applied."""
    return CommandContext.create(
        config=Config(config_path),
        verbose=verbose,
        quiet=quiet,
    )


if __name__ == "__main__":
    cli()
