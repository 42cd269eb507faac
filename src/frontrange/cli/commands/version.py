# topmark:header:start
#
#   project      : FrontRange
#   file         : version.py
#   file_relpath : src/frontrange/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `version` command."""

from __future__ import annotations

import click

from frontrange.cli.console import get_console
from frontrange.constants import FRONTRANGE_VERSION


@click.command(
    name="version",
    help="Show the installed version of FrontRange.",
)
def version_command() -> None:
    """Print the FrontRange version as installed in the active environment."""
    console = get_console()
    if console.verbosity > 0:
        console.print(console.styled("FrontRange version:", bold=True, underline=True))
        console.print(f"    {console.styled(FRONTRANGE_VERSION, bold=True)}")
    else:
        console.print(FRONTRANGE_VERSION)
