# topmark:header:start
#
#   project      : FrontRange
#   file         : main.py
#   file_relpath : src/frontrange/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Entry point of the `fr` command line.

Group-level options (verbosity, color and the formatting overrides) are
initialized once and placed into ``ctx.obj``; every subcommand reads its
console and its override layer from there.
"""

from __future__ import annotations

from typing import Any

import click

from frontrange.cli.commands.array import array_group
from frontrange.cli.commands.config import config_group
from frontrange.cli.commands.dump import dump_command
from frontrange.cli.commands.get import get_command
from frontrange.cli.commands.has import has_command
from frontrange.cli.commands.lines import lines_command
from frontrange.cli.commands.list_keys import list_command
from frontrange.cli.commands.remove import remove_command
from frontrange.cli.commands.rename import rename_command
from frontrange.cli.commands.replace import replace_command
from frontrange.cli.commands.set_value import set_command
from frontrange.cli.commands.sort_keys import sort_keys_command
from frontrange.cli.commands.version import version_command
from frontrange.cli.console import ClickConsole
from frontrange.cli.options import (
    ColorMode,
    common_color_options,
    common_format_options,
    common_verbose_options,
    overrides_from_options,
    resolve_color_mode,
    resolve_verbosity,
)
from frontrange.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    format_options: dict[str, Any],
) -> None:
    """Initialize shared state on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        format_options (dict[str, Any]): Parsed formatting overrides and ``no_config``.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # Internal logging via env
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color, verbosity=level_cli)

    overrides = overrides_from_options(format_options)
    ctx.obj["overrides"] = overrides
    ctx.obj["no_config"] = bool(format_options.get("no_config"))
    logger.debug("CLI overrides: %s", overrides.set_fields() or "none")


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Read and edit YAML front matter in text files.",
)
@common_verbose_options
@common_color_options
@common_format_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    **format_options: Any,
) -> None:
    """Entry point for the FrontRange CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        format_options=format_options,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'fr get KEY FILE...' to read a front matter value.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(get_command)

cli.add_command(has_command)

cli.add_command(list_command)

cli.add_command(set_command)

cli.add_command(remove_command)

cli.add_command(rename_command)

cli.add_command(sort_keys_command)

cli.add_command(array_group)

cli.add_command(dump_command)

cli.add_command(lines_command)

cli.add_command(replace_command)

cli.add_command(config_group)

if __name__ == "__main__":
    cli()
