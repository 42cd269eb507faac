# topmark:header:start
#
#   project      : FrontRange
#   file         : set_value.py
#   file_relpath : src/frontrange/cli/commands/set_value.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `set` command.

Binds a top-level key to a value in every file, keeping the key's position
when it already exists and appending it otherwise.

VALUE is stored as a plain scalar, so ``42`` and ``true`` keep their YAML
meaning. With ``--yaml`` it is parsed as a YAML value instead, which allows
sequences and mappings:

    $ fr set --yaml tags '[python, yaml]' post.md
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from frontrange.cli.cmd_common import FileBatch
from frontrange.cli.errors import FrontRangeUsageError
from frontrange.cli.options import paths_argument
from frontrange.document.convert import parse_data

if TYPE_CHECKING:
    from frontrange.core.nodes import Node


@click.command(
    name="set",
    help="Set KEY to VALUE in each file's front matter.",
)
@click.option(
    "--yaml",
    "as_yaml",
    is_flag=True,
    help="Parse VALUE as a YAML value instead of storing it as text.",
)
@click.argument("key")
@click.argument("value")
@paths_argument
def set_command(key: str, value: str, paths: tuple[str, ...], as_yaml: bool) -> None:
    """Set KEY to VALUE."""
    new_value: Node | Any = value
    if as_yaml:
        try:
            new_value = parse_data(value, "yaml")
        except ValueError as exc:
            raise FrontRangeUsageError(f"VALUE: {exc}") from exc

    batch = FileBatch(paths)
    for path, text, document, _layout in batch.documents():
        batch.save(path, text, document, document.set(key, new_value))
    batch.finish()
