# topmark:header:start
#
#   project      : FrontRange
#   file         : errors.py
#   file_relpath : src/frontrange/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Exceptions for the FrontRange CLI.

Each exception carries the exit code the process should end with. Library
errors are translated with
[`cli_error_from`][frontrange.cli.errors.cli_error_from] so that commands can simply
``raise cli_error_from(exc) from exc``.

Styling:
    Errors prefer the project console from the Click context (see `show()`);
    without one they fall back to Click's default output.
"""

from __future__ import annotations

from typing import IO, Any

import click

from frontrange.cli.exit_codes import ExitCode
from frontrange.core.errors import ConfigError, DocumentParseError


class FrontRangeCliError(click.ClickException):
    """Base class for all FrontRange CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain message; color is applied in `show()`."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the project console when one is available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class FrontRangeUsageError(FrontRangeCliError):
    """Invalid combination of flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class FrontRangeNotFoundError(FrontRangeCliError):
    """A requested key or value is absent."""

    exit_code = ExitCode.NOT_FOUND


class FrontRangeParseError(FrontRangeCliError):
    """A document could not be parsed."""

    exit_code = ExitCode.PARSE_ERROR


class FrontRangeFileNotFoundError(FrontRangeCliError):
    """An input path does not exist or is not a file."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FrontRangeIOError(FrontRangeCliError):
    """Reading or writing a file failed."""

    exit_code = ExitCode.IO_ERROR


class FrontRangeConfigError(FrontRangeCliError):
    """A configuration file is malformed."""

    exit_code = ExitCode.CONFIG_ERROR


def cli_error_from(exc: Exception) -> FrontRangeCliError:
    """Translate a library or OS exception into the matching CLI error."""
    if isinstance(exc, DocumentParseError):
        return FrontRangeParseError(str(exc))
    if isinstance(exc, ConfigError):
        return FrontRangeConfigError(str(exc))
    if isinstance(exc, (FileNotFoundError, IsADirectoryError)):
        return FrontRangeFileNotFoundError(f"{exc.strerror}: {exc.filename}")
    if isinstance(exc, UnicodeDecodeError):
        return FrontRangeParseError(f"not valid UTF-8 text: {exc}")
    if isinstance(exc, OSError):
        return FrontRangeIOError(str(exc))
    return FrontRangeCliError(str(exc))
