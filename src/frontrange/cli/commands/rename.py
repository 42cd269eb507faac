# topmark:header:start
#
#   project      : FrontRange
#   file         : rename.py
#   file_relpath : src/frontrange/cli/commands/rename.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `rename` command.

Renames a top-level key in place. A file where OLD is missing, or where NEW
already exists, is reported and left untouched; the other files are still
processed.
"""

from __future__ import annotations

import click

from frontrange.cli.cmd_common import FileBatch
from frontrange.cli.options import paths_argument
from frontrange.core.errors import MutationError


@click.command(
    name="rename",
    help="Rename key OLD to NEW in each file's front matter.",
)
@click.argument("old")
@click.argument("new")
@paths_argument
def rename_command(old: str, new: str, paths: tuple[str, ...]) -> None:
    """Rename OLD to NEW, keeping the entry's position."""
    batch = FileBatch(paths)
    for path, text, document, _layout in batch.documents():
        try:
            updated = document.rename(old, new)
        except MutationError as exc:
            batch.edit_failed(path, exc)
            continue
        batch.save(path, text, document, updated)
    batch.finish()
