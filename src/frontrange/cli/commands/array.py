# topmark:header:start
#
#   project      : FrontRange
#   file         : array.py
#   file_relpath : src/frontrange/cli/commands/array.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `array` command group.

Subcommands edit or query a top-level sequence. Element comparison is by
scalar text (optionally case-insensitive); nested collections never match.

Examples:
  Add a tag unless it is already there:

    $ fr array append --skip-duplicates tags python posts/*.md

  List files tagged "draft", one path per line, for use with xargs:

    $ fr array contains tags draft posts/*.md | xargs fr set published false
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import click

from frontrange.cli.cli_types import EnumChoiceParam, OutputFormat
from frontrange.cli.cmd_common import FileBatch, render_value
from frontrange.cli.exit_codes import ExitCode
from frontrange.cli.options import paths_argument
from frontrange.config.logging import get_logger
from frontrange.config.model import DEFAULT_PROFILE
from frontrange.core.errors import MutationError
from frontrange.document.convert import node_from_python
from frontrange.document.model import ArrayEditOutcome

if TYPE_CHECKING:
    from frontrange.document.model import ArrayEdit, Document

logger = get_logger(__name__)

case_insensitive_option = click.option(
    "-i",
    "--case-insensitive",
    is_flag=True,
    help="Compare values case-insensitively.",
)


@click.group(
    name="array",
    help="Edit or query array (sequence) values in front matter.",
)
def array_group() -> None:
    """Group for array subcommands."""


def _run_insert(
    paths: tuple[str, ...],
    insert: Callable[[Document], ArrayEdit],
) -> None:
    batch = FileBatch(paths)
    updated = skipped = 0
    for path, text, document, _layout in batch.documents():
        try:
            edit = insert(document)
        except MutationError as exc:
            batch.edit_failed(path, exc)
            continue
        if edit.outcome is ArrayEditOutcome.SKIPPED_DUPLICATE:
            batch.console.info(f"Skipping {path}: value already present")
            skipped += 1
            continue
        if batch.save(path, text, document, edit.document):
            updated += 1
    batch.console.info(f"Updated {updated} file(s), skipped {skipped}")
    batch.finish()


@array_group.command(
    name="append",
    help="Append VALUE to the array at KEY.",
)
@click.option(
    "--skip-duplicates",
    is_flag=True,
    help="Leave files alone whose array already holds VALUE.",
)
@case_insensitive_option
@click.argument("key")
@click.argument("value")
@paths_argument
def array_append_command(
    key: str,
    value: str,
    paths: tuple[str, ...],
    skip_duplicates: bool,
    case_insensitive: bool,
) -> None:
    """Append VALUE to the array at KEY."""
    _run_insert(
        paths,
        lambda doc: doc.array_append(
            key, value, skip_duplicates=skip_duplicates, case_insensitive=case_insensitive
        ),
    )


@array_group.command(
    name="prepend",
    help="Insert VALUE at the start of the array at KEY.",
)
@click.option(
    "--skip-duplicates",
    is_flag=True,
    help="Leave files alone whose array already holds VALUE.",
)
@case_insensitive_option
@click.argument("key")
@click.argument("value")
@paths_argument
def array_prepend_command(
    key: str,
    value: str,
    paths: tuple[str, ...],
    skip_duplicates: bool,
    case_insensitive: bool,
) -> None:
    """Prepend VALUE to the array at KEY."""
    _run_insert(
        paths,
        lambda doc: doc.array_prepend(
            key, value, skip_duplicates=skip_duplicates, case_insensitive=case_insensitive
        ),
    )


@array_group.command(
    name="remove",
    help="Remove the first element equal to VALUE from the array at KEY.",
)
@case_insensitive_option
@click.argument("key")
@click.argument("value")
@paths_argument
def array_remove_command(
    key: str,
    value: str,
    paths: tuple[str, ...],
    case_insensitive: bool,
) -> None:
    """Remove the first matching element; files without a match are skipped."""
    batch = FileBatch(paths)
    updated = skipped = 0
    for path, text, document, _layout in batch.documents():
        try:
            edit = document.array_remove_first(key, value, case_insensitive=case_insensitive)
        except MutationError as exc:
            batch.edit_failed(path, exc)
            continue
        if edit.outcome is ArrayEditOutcome.NOT_FOUND:
            batch.console.info(f"Skipping {path}: value not found")
            skipped += 1
            continue
        if batch.save(path, text, document, edit.document):
            updated += 1
    if updated == 0:
        batch.console.warn(f"No files were modified (value '{value}' not found in any arrays)")
    else:
        batch.console.info(f"Updated {updated} file(s)")
        if skipped:
            batch.console.info(f"Skipped {skipped} file(s) where value was not found")
    batch.finish()


@array_group.command(
    name="contains",
    help="Print the files whose array at KEY contains VALUE.",
)
@case_insensitive_option
@click.option(
    "--invert",
    is_flag=True,
    help="Print the files whose array does NOT contain VALUE.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=OutputFormat.PLAIN.value,
    show_default=True,
    help="Output format; plain prints one path per line.",
)
@click.argument("key")
@click.argument("value")
@paths_argument
def array_contains_command(
    key: str,
    value: str,
    paths: tuple[str, ...],
    case_insensitive: bool,
    invert: bool,
    output_format: OutputFormat,
) -> None:
    """Filter files by array membership.

    Files that cannot be parsed, lack KEY, or hold a non-array under KEY are
    skipped. Exits with ``ExitCode.NOT_FOUND`` when no file matches.
    """
    batch = FileBatch(paths, skip_unreadable=True)
    matching: list[str] = []
    for path, _text, document, _layout in batch.documents():
        try:
            found = document.array_contains(key, value, case_insensitive=case_insensitive)
        except MutationError as exc:
            logger.debug("skipping %s: %s", path, exc)
            continue
        if found != invert:
            matching.append(str(path))

    if not matching:
        negation = " NOT" if invert else ""
        batch.console.warn(f"No files found where '{key}' array{negation} contains '{value}'")
        batch.ctx.exit(int(ExitCode.NOT_FOUND))

    if output_format is OutputFormat.PLAIN:
        for match in matching:
            batch.console.print(match)
    else:
        batch.console.print(
            render_value(node_from_python(matching), output_format, DEFAULT_PROFILE)
        )
