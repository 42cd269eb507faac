# topmark:header:start
#
#   project      : FrontRange
#   file         : list_keys.py
#   file_relpath : src/frontrange/cli/commands/list_keys.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `list` command: print the top-level keys in document order."""

from __future__ import annotations

import click

from frontrange.cli.cli_types import EnumChoiceParam, OutputFormat
from frontrange.cli.cmd_common import FileBatch, render_value
from frontrange.cli.options import paths_argument
from frontrange.document.convert import node_from_python


@click.command(
    name="list",
    help="List the top-level keys of each file's front matter.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=OutputFormat.PLAIN.value,
    show_default=True,
    help="Output format; plain prints one key per line.",
)
@paths_argument
def list_command(paths: tuple[str, ...], output_format: OutputFormat) -> None:
    """List top-level keys."""
    batch = FileBatch(paths)
    for index, (path, _text, document, _layout) in enumerate(batch.documents()):
        batch.header(path, index)
        keys = document.keys()
        if output_format is OutputFormat.PLAIN:
            for key in keys:
                batch.console.print(key)
            continue
        batch.console.print(
            render_value(node_from_python(keys), output_format, batch.profile(path))
        )
    batch.finish()
