# topmark:header:start
#
#   project      : FrontRange
#   file         : remove.py
#   file_relpath : src/frontrange/cli/commands/remove.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `remove` command: delete a top-level key. Absent keys are left alone."""

from __future__ import annotations

import click

from frontrange.cli.cmd_common import FileBatch
from frontrange.cli.options import paths_argument


@click.command(
    name="remove",
    help="Remove KEY from each file's front matter.",
)
@click.argument("key")
@paths_argument
def remove_command(key: str, paths: tuple[str, ...]) -> None:
    """Remove KEY."""
    batch = FileBatch(paths)
    for path, text, document, _layout in batch.documents():
        updated = document.remove(key)
        if updated is document:
            batch.console.info(f"{path}: key '{key}' not present")
        batch.save(path, text, document, updated)
    batch.finish()
