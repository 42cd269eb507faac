# topmark:header:start
#
#   project      : FrontRange
#   file         : dump.py
#   file_relpath : src/frontrange/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `dump` command.

Prints the whole front matter of each file:

- ``json`` (default): the constructed values as a JSON object.
- ``yaml``: re-emitted with the effective render profile.
- ``raw``: the preamble text exactly as it appears in the file.
- ``plist``: the constructed values as an XML property list.

With several files, ``--multi-format`` decides how the results are combined:

- ``cat`` (default): each block is preceded by a ``==> path <==`` header.
- ``json``, ``yaml``, ``plist``: one array of ``{path, frontMatter}`` objects.
  When ``--format`` matches the combining format (``raw`` counts as ``yaml``)
  the front matter is embedded as structured data; otherwise each entry holds
  the rendered text as a string.

``--include-file-metadata`` adds ``created`` and ``modified`` timestamps to
each entry of the structured output. A single file is always printed as is.

Examples:
    $ fr dump post.md
    $ fr dump --format yaml --include-delimiters post.md
    $ fr dump --multi-format json posts/*.md
    $ fr dump --format yaml --multi-format json posts/*.md
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any

import click

from frontrange.cli.cli_types import DumpFormat, EnumChoiceParam, MultiFormat
from frontrange.cli.cmd_common import FileBatch
from frontrange.cli.options import paths_argument
from frontrange.config.logging import get_logger
from frontrange.constants import PREAMBLE_DELIMITER
from frontrange.document.convert import node_from_python, to_json, to_plist
from frontrange.document.emitter import emit_node
from frontrange.document.parser import split_front_matter
from frontrange.document.printer import render_preamble

if TYPE_CHECKING:
    from pathlib import Path

    from frontrange.config.logging import FrontRangeLogger
    from frontrange.config.model import RenderProfile
    from frontrange.document.model import Document

logger: FrontRangeLogger = get_logger(__name__)

# Per-file formats that embed as structured data in each combining format
_EMBEDDABLE: dict[MultiFormat, frozenset[DumpFormat]] = {
    MultiFormat.JSON: frozenset({DumpFormat.JSON}),
    MultiFormat.YAML: frozenset({DumpFormat.YAML, DumpFormat.RAW}),
    MultiFormat.PLIST: frozenset({DumpFormat.PLIST}),
}


def render_block(
    output_format: DumpFormat,
    text: str,
    document: Document,
    profile: RenderProfile,
    *,
    delimited: bool,
) -> str:
    """Render one file's front matter; the result ends with a line break unless empty."""
    if output_format is DumpFormat.JSON:
        return to_json(document.to_python()) + "\n"
    if output_format is DumpFormat.PLIST:
        return to_plist(document.to_python())
    if output_format is DumpFormat.RAW:
        block = split_front_matter(text).preamble
    else:
        block = render_preamble(document.preamble, profile)
    if block and not block.endswith(("\n", "\r")):
        block += "\n"
    if delimited:
        block = f"{PREAMBLE_DELIMITER}\n{block}{PREAMBLE_DELIMITER}\n"
    return block


def _file_metadata(path: Path) -> dict[str, str]:
    stat = path.stat()
    created = getattr(stat, "st_birthtime", stat.st_ctime)

    def iso(ts: float) -> str:
        return datetime.datetime.fromtimestamp(ts, tz=datetime.timezone.utc).isoformat()

    return {"created": iso(created), "modified": iso(stat.st_mtime)}


def _print_structured(batch: FileBatch, items: list[dict[str, Any]], multi: MultiFormat) -> None:
    console = batch.console
    if multi is MultiFormat.JSON:
        console.print(to_json(items))
    elif multi is MultiFormat.PLIST:
        console.print(to_plist(items), nl=False)
    else:
        console.print(emit_node(node_from_python(items), batch.output_profile()), nl=False)


@click.command(
    name="dump",
    help="Print the entire front matter of each file.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(DumpFormat),
    default=DumpFormat.JSON.value,
    show_default=True,
    help="Output format for each file's front matter.",
)
@click.option(
    "--multi-format",
    "multi_format",
    type=EnumChoiceParam(MultiFormat),
    default=MultiFormat.CAT.value,
    show_default=True,
    help="How several files are combined: headers (cat) or one structured array.",
)
@click.option(
    "--include-delimiters",
    is_flag=True,
    help="Wrap yaml and raw output in '---' lines.",
)
@click.option(
    "--include-file-metadata",
    is_flag=True,
    help="Add created/modified timestamps to structured multi-file output.",
)
@paths_argument
def dump_command(
    paths: tuple[str, ...],
    output_format: DumpFormat,
    multi_format: MultiFormat,
    include_delimiters: bool,
    include_file_metadata: bool,
) -> None:
    """Print front matter."""
    batch = FileBatch(paths)
    console = batch.console
    delimited = include_delimiters and output_format in (DumpFormat.YAML, DumpFormat.RAW)
    structured = batch.multiple and multi_format is not MultiFormat.CAT
    if include_file_metadata and not structured:
        console.warn("--include-file-metadata only applies to structured multi-file output")

    if not structured:
        for index, (path, text, document, _layout) in enumerate(batch.documents()):
            batch.header(path, index)
            block = render_block(
                output_format, text, document, batch.profile(path), delimited=delimited
            )
            if block:
                console.print(block, nl=False)
        batch.finish()
        return

    embed = output_format in _EMBEDDABLE[multi_format]
    logger.debug(
        "dumping %d files as %s (%s)",
        len(batch.paths),
        multi_format.value,
        "embedded" if embed else "as text",
    )
    items: list[dict[str, Any]] = []
    for path, text, document, _layout in batch.documents():
        front_matter: Any
        if embed:
            front_matter = document.to_python()
        else:
            front_matter = render_block(
                output_format, text, document, batch.profile(path), delimited=delimited
            )
        item: dict[str, Any] = {"path": str(path), "frontMatter": front_matter}
        if include_file_metadata:
            try:
                item.update(_file_metadata(path))
            except OSError as exc:
                batch.fail(path, exc)
                continue
        items.append(item)
    _print_structured(batch, items, multi_format)
    batch.finish()
