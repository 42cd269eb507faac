# topmark:header:start
#
#   project      : FrontRange
#   file         : get.py
#   file_relpath : src/frontrange/cli/commands/get.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `get` command.

Prints the value stored under a top-level key of each file's front matter.

Examples:
  Print a title as JSON (the default):

    $ fr get title post.md

  Print raw scalar text, e.g. for shell scripts:

    $ fr get --format plain title post.md
"""

from __future__ import annotations

import click

from frontrange.cli.cli_types import EnumChoiceParam, OutputFormat
from frontrange.cli.cmd_common import FileBatch, render_value
from frontrange.cli.exit_codes import ExitCode
from frontrange.cli.options import paths_argument
from frontrange.config.logging import get_logger

logger = get_logger(__name__)


@click.command(
    name="get",
    help="Print the value of KEY in each file's front matter.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=OutputFormat.JSON.value,
    show_default=True,
    help="Output format.",
)
@click.argument("key")
@paths_argument
def get_command(key: str, paths: tuple[str, ...], output_format: OutputFormat) -> None:
    """Print the value of KEY.

    Files that lack the key are reported on stderr and make the command exit
    with ``ExitCode.NOT_FOUND``.
    """
    batch = FileBatch(paths)
    for index, (path, _text, document, _layout) in enumerate(batch.documents()):
        batch.header(path, index)
        node = document.get_resolved(key)
        if node is None:
            batch.console.warn(f"{path}: key '{key}' not found")
            batch.record(ExitCode.NOT_FOUND)
            continue
        batch.console.print(render_value(node, output_format, batch.profile(path)))
    batch.finish()
