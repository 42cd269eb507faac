# topmark:header:start
#
#   project      : FrontRange
#   file         : console.py
#   file_relpath : src/frontrange/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Program-output console for the CLI.

Command results go to stdout through `ClickConsole.print`; warnings and
errors go to stderr. Diagnostics for developers go through `logging` instead
(see [`frontrange.config.logging`][frontrange.config.logging]).
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Console writing through `click.echo`, so CliRunner can capture it.

    Args:
        enable_color (bool): Emit ANSI styles; otherwise plain text.
        verbosity (int): Program-output verbosity (0 terse, higher is chattier,
            negative silences informational messages).
        out (TextIO | None): Stream for results (defaults to `sys.stdout`).
        err (TextIO | None): Stream for diagnostics (defaults to `sys.stderr`).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        verbosity: int = 0,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.verbosity: int = verbosity
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a result line to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def info(self, text: str) -> None:
        """Write a progress message to stderr, only when running with ``-v``."""
        if self.verbosity > 0:
            click.secho(text, file=self.err, color=self.enable_color, dim=True)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr unless running with ``-q``."""
        if self.verbosity >= 0:
            click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return `text` styled with `click.style`, or unchanged when color is off."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def file_header(self, path: object) -> str:
        """Return the ``==> path <==`` separator used in multi-file output."""
        return self.styled(f"==> {path} <==", bold=True)


def get_console(ctx: click.Context | None = None) -> ClickConsole:
    """Return the console stored on the Click context, or a plain default one."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None and isinstance(ctx.obj, dict):
        console = ctx.obj.get("console")
        if isinstance(console, ClickConsole):
            return console
    return ClickConsole(enable_color=False)
