# topmark:header:start
#
#   project      : FrontRange
#   file         : sort_keys.py
#   file_relpath : src/frontrange/cli/commands/sort_keys.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `sort-keys` command: reorder top-level keys."""

from __future__ import annotations

import click

from frontrange.cli.cli_types import EnumChoiceParam
from frontrange.cli.cmd_common import FileBatch
from frontrange.cli.options import paths_argument
from frontrange.document.model import SortMethod


@click.command(
    name="sort-keys",
    help="Sort the top-level keys of each file's front matter.",
)
@click.option(
    "--method",
    "method",
    type=EnumChoiceParam(SortMethod),
    default=SortMethod.ALPHABETICAL.value,
    show_default=True,
    help="alphabetical, or length (shortest first, ties alphabetical).",
)
@click.option("--reverse", is_flag=True, help="Reverse the resulting order.")
@paths_argument
def sort_keys_command(paths: tuple[str, ...], method: SortMethod, reverse: bool) -> None:
    """Sort top-level keys; nested mappings keep their order."""
    batch = FileBatch(paths)
    for path, text, document, _layout in batch.documents():
        batch.save(path, text, document, document.sort_keys(method, reverse=reverse))
    batch.finish()
