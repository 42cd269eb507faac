# topmark:header:start
#
#   project      : FrontRange
#   file         : lines.py
#   file_relpath : src/frontrange/cli/commands/lines.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `lines` command.

Extracts a range of lines from a single file, either by explicit 1-based
line numbers or by the lines a top-level front matter key spans:

    $ fr lines post.md --start 1 --end 5 --numbered
    $ fr lines post.md --key tags

An end line past the end of the file is clamped to the last line.
"""

from __future__ import annotations

from pathlib import Path

import click

from frontrange.cli.console import get_console
from frontrange.cli.errors import (
    FrontRangeCliError,
    FrontRangeNotFoundError,
    FrontRangeUsageError,
    cli_error_from,
)
from frontrange.cli.io import load_document, read_text
from frontrange.config.logging import get_logger
from frontrange.core.errors import DocumentParseError
from frontrange.core.lines import LineIndex

logger = get_logger(__name__)


@click.command(
    name="lines",
    help="Print a range of lines from FILE.",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("-s", "--start", type=int, default=None, help="First line (1-based).")
@click.option("-e", "--end", type=int, default=None, help="Last line (1-based, inclusive).")
@click.option("-k", "--key", default=None, help="Print the lines spanned by this front matter key.")
@click.option("-n", "--numbered", is_flag=True, help="Prefix each line with its number.")
def lines_command(
    file: Path,
    start: int | None,
    end: int | None,
    key: str | None,
    numbered: bool,
) -> None:
    """Print lines of FILE."""
    if key is not None and (start is not None or end is not None):
        raise FrontRangeUsageError("Use either --key or --start/--end, not both.")

    if key is None:
        if start is None or end is None:
            raise FrontRangeUsageError("Both --start and --end are required without --key.")
        if start < 1:
            raise FrontRangeUsageError("Start line must be greater than 0.")
        if end < start:
            raise FrontRangeUsageError("End line must be greater than or equal to start line.")
        try:
            text = read_text(file)
        except (OSError, UnicodeDecodeError) as exc:
            raise cli_error_from(exc) from exc
    else:
        try:
            text, _document, layout = load_document(file)
        except (OSError, UnicodeDecodeError, DocumentParseError) as exc:
            raise cli_error_from(exc) from exc
        span = layout.key_lines(key)
        if span is None:
            raise FrontRangeNotFoundError(f"key '{key}' not found in {file}")
        start, end = span

    index = LineIndex(text)
    logger.debug("extracting lines %d-%d of %s (%d lines)", start, end, file, index.line_count)
    rows = index.numbered(start, end)
    if rows is None:
        raise FrontRangeCliError(
            f"{file} has {index.line_count} lines; cannot extract lines {start}-{end}"
        )
    console = get_console()
    for number, line in rows:
        console.print(f"{number}: {line}" if numbered else line)
