# topmark:header:start
#
#   project      : FrontRange
#   file         : cmd_common.py
#   file_relpath : src/frontrange/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Plumbing shared by CLI commands.

Commands that accept several files process them as a batch: a file that
cannot be read, parsed or edited is reported on stderr and skipped, and the
batch remembers the first failure's exit code so the process still ends with a
non-zero status.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from frontrange.cli.console import get_console
from frontrange.cli.cli_types import OutputFormat
from frontrange.cli.errors import cli_error_from
from frontrange.cli.exit_codes import ExitCode
from frontrange.cli.io import load_document, write_text
from frontrange.config.logging import get_logger
from frontrange.config.model import PartialConfig
from frontrange.config.resolver import ResolvedProfile, load_layered
from frontrange.core.errors import ConfigError, DocumentParseError, MutationError
from frontrange.core.nodes import ScalarNode
from frontrange.document.convert import node_to_python, to_json
from frontrange.document.emitter import emit_node

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from frontrange.cli.console import ClickConsole
    from frontrange.config.logging import FrontRangeLogger
    from frontrange.config.model import RenderProfile
    from frontrange.core.nodes import Node
    from frontrange.document.model import Document
    from frontrange.document.parser import DocumentLayout

logger: FrontRangeLogger = get_logger(__name__)


def resolve_profile_for(
    ctx: click.Context, path: Path, *, is_dir: bool = False
) -> ResolvedProfile:
    """Resolve the render profile that applies to `path` (a file, or a directory with `is_dir`).

    Results are cached per directory for the duration of the invocation.

    Raises:
        FrontRangeConfigError: If a config file on the way is malformed.
    """
    obj: dict[str, object] = ctx.find_root().obj or {}
    cache: dict[str, ResolvedProfile] = obj.setdefault("profile_cache", {})  # type: ignore[assignment]
    anchor = path if is_dir else path.parent
    key = str(anchor)
    if key not in cache:
        overrides = obj.get("overrides")
        no_config = bool(obj.get("no_config", False))
        try:
            cache[key] = load_layered(
                anchor,
                overrides if isinstance(overrides, PartialConfig) else None,
                use_global=not no_config,
                use_project=not no_config,
            )
        except ConfigError as exc:
            raise cli_error_from(exc) from exc
    return cache[key]


class FileBatch:
    """Iterate over input files, collecting per-file failures.

    Args:
        paths (Iterable[str | Path]): Files named on the command line.
        ctx (click.Context | None): Current Click context (looked up when None).
        skip_unreadable (bool): Silently skip files that cannot be read or parsed
            instead of reporting them as failures.
    """

    def __init__(
        self,
        paths: Iterable[str | Path],
        ctx: click.Context | None = None,
        *,
        skip_unreadable: bool = False,
    ) -> None:
        self.ctx: click.Context = ctx or click.get_current_context()
        self.paths: list[Path] = [Path(p) for p in paths]
        self.console: ClickConsole = get_console(self.ctx)
        self.exit_code: ExitCode = ExitCode.SUCCESS
        self.skip_unreadable: bool = skip_unreadable

    @property
    def multiple(self) -> bool:
        """True when more than one file was given (output gets ``==> path <==`` headers)."""
        return len(self.paths) > 1

    def record(self, code: ExitCode) -> None:
        """Remember `code` unless an earlier failure was already recorded."""
        if self.exit_code is ExitCode.SUCCESS:
            self.exit_code = code

    def fail(self, path: Path, exc: Exception) -> None:
        """Report a per-file failure and record its exit code."""
        err = cli_error_from(exc)
        logger.debug("skipping %s: %s", path, exc)
        self.console.error(f"{path}: {err.format_message()}")
        self.record(ExitCode(err.exit_code))

    def documents(self) -> Iterator[tuple[Path, str, Document, DocumentLayout]]:
        """Yield ``(path, text, document, layout)`` for every file that parses."""
        for path in self.paths:
            try:
                text, document, layout = load_document(path)
            except (OSError, UnicodeDecodeError, DocumentParseError) as exc:
                if self.skip_unreadable:
                    logger.debug("skipping unreadable %s: %s", path, exc)
                    continue
                self.fail(path, exc)
                continue
            self.console.info(f"Processing {path}")
            yield path, text, document, layout

    def profile(self, path: Path) -> RenderProfile:
        """The render profile for `path`."""
        return resolve_profile_for(self.ctx, path).profile

    def output_profile(self) -> RenderProfile:
        """The render profile of the working directory, for output not tied to one file."""
        return resolve_profile_for(self.ctx, Path.cwd(), is_dir=True).profile

    def save(self, path: Path, original_text: str, before: Document, after: Document) -> bool:
        """Write `after` to `path` if it differs from `before`.

        Edits that do nothing return the very same document, so an identity
        check avoids reformatting untouched files.

        Returns:
            bool: True if the file was rewritten.
        """
        if after is before:
            return False
        text = after.render(self.profile(path))
        if text == original_text:
            return False
        try:
            write_text(path, text)
        except OSError as exc:
            self.fail(path, exc)
            return False
        self.console.info(f"Updated {path}")
        return True

    def edit_failed(self, path: Path, exc: MutationError) -> None:
        """Report a failed edit precondition for `path`."""
        self.console.error(f"{path}: {exc}")
        self.record(ExitCode.FAILURE)

    def header(self, path: Path, index: int) -> None:
        """Print the multi-file separator before the output for `path`."""
        if not self.multiple:
            return
        if index > 0:
            self.console.print()
        self.console.print(self.console.file_header(path))

    def finish(self) -> None:
        """Exit with the recorded code if any file failed."""
        if self.exit_code is not ExitCode.SUCCESS:
            self.ctx.exit(int(self.exit_code))


def render_value(node: Node, output_format: OutputFormat, profile: RenderProfile) -> str:
    """Format a value node for printing.

    ``plain`` prints scalar text as-is and falls back to YAML for collections.
    The returned text has no trailing line break.
    """
    if output_format is OutputFormat.JSON:
        return to_json(node_to_python(node))
    if output_format is OutputFormat.PLAIN and isinstance(node, ScalarNode):
        return node.text
    text = emit_node(node, profile)
    # A bare scalar document may carry an explicit end marker
    if text.endswith("\n...\n"):
        text = text[: -len("...\n")]
    return text.rstrip("\r\n")
