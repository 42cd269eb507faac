# topmark:header:start
#
#   project      : FrontRange
#   file         : replace.py
#   file_relpath : src/frontrange/cli/commands/replace.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `replace` command.

Replaces the entire front matter of each file with new data given inline
(``--data``) or read from a file (``--from-file``), keeping every body
unchanged.

Examples:
    $ fr replace --data '{"title": "New", "tags": ["a"]}' post.md
    $ fr replace --from-file meta.yaml --format yaml posts/*.md
    $ fr replace --from-file meta.plist --format plist post.md
"""

from __future__ import annotations

from pathlib import Path

import click

from frontrange.cli.cli_types import DataFormat, EnumChoiceParam
from frontrange.cli.cmd_common import FileBatch
from frontrange.cli.errors import FrontRangeUsageError, cli_error_from
from frontrange.cli.io import read_text
from frontrange.cli.options import paths_argument
from frontrange.config.logging import get_logger
from frontrange.core.nodes import MappingNode
from frontrange.document.convert import parse_data

logger = get_logger(__name__)


def _load_replacement(data: str | None, from_file: Path | None) -> str:
    if data is not None:
        if from_file is not None:
            raise FrontRangeUsageError("Cannot use both --data and --from-file.")
        return data
    if from_file is None:
        raise FrontRangeUsageError("Must specify either --data or --from-file.")
    logger.debug("reading replacement data from %s", from_file)
    try:
        return read_text(from_file)
    except (OSError, UnicodeDecodeError) as exc:
        raise cli_error_from(exc) from exc


@click.command(
    name="replace",
    help="Replace the entire front matter of each file.",
)
@click.option("--data", default=None, help="Inline data to use as the new front matter.")
@click.option(
    "--from-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="File containing the new front matter.",
)
@click.option(
    "--format",
    "data_format",
    type=EnumChoiceParam(DataFormat),
    default=DataFormat.JSON.value,
    show_default=True,
    help="Format of the replacement data.",
)
@paths_argument
def replace_command(
    paths: tuple[str, ...],
    data: str | None,
    from_file: Path | None,
    data_format: DataFormat,
) -> None:
    """Replace front matter with DATA."""
    text = _load_replacement(data, from_file)
    try:
        node = parse_data(text, data_format.value)
    except ValueError as exc:
        raise FrontRangeUsageError(str(exc)) from exc
    if not isinstance(node, MappingNode):
        raise FrontRangeUsageError("Replacement data must be a mapping (key/value object).")

    batch = FileBatch(paths)
    for path, original, document, _layout in batch.documents():
        batch.save(path, original, document, document.replace_preamble(node.mapping))
    batch.finish()
