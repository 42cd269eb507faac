# topmark:header:start
#
#   project      : FrontRange
#   file         : has.py
#   file_relpath : src/frontrange/cli/commands/has.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `has` command.

Prints ``true`` or ``false`` per file; exits with ``ExitCode.NOT_FOUND`` when
any file lacks the key, so it can be used in shell conditions.
"""

from __future__ import annotations

import click

from frontrange.cli.cmd_common import FileBatch
from frontrange.cli.exit_codes import ExitCode
from frontrange.cli.options import paths_argument


@click.command(
    name="has",
    help="Check whether KEY exists in each file's front matter.",
)
@click.argument("key")
@paths_argument
def has_command(key: str, paths: tuple[str, ...]) -> None:
    """Report whether KEY is present."""
    batch = FileBatch(paths)
    for index, (path, _text, document, _layout) in enumerate(batch.documents()):
        batch.header(path, index)
        present = document.has(key)
        batch.console.print("true" if present else "false")
        if not present:
            batch.record(ExitCode.NOT_FOUND)
    batch.finish()
