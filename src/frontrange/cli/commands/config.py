# topmark:header:start
#
#   project      : FrontRange
#   file         : config.py
#   file_relpath : src/frontrange/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange `config` command group.

- ``fr config show [PATH]``: print the effective render profile for PATH
  (a file or directory, default: the current directory) as TOML.
- ``fr config path [PATH]``: print the config files that contribute to it,
  lowest precedence first.
"""

from __future__ import annotations

from pathlib import Path

import click

from frontrange.cli.cmd_common import resolve_profile_for
from frontrange.cli.console import get_console
from frontrange.config.io import to_toml
from frontrange.config.keys import Toml


def _anchor(path: Path | None) -> Path:
    """Return a path whose parent is the directory the lookup starts from."""
    base = path or Path.cwd()
    # resolve_profile_for() looks upward from the parent of its argument
    return base / "_" if base.is_dir() else base


@click.group(
    name="config",
    help="Inspect formatting configuration.",
)
def config_group() -> None:
    """Group for configuration subcommands."""


@config_group.command(
    name="show",
    help="Print the effective formatting profile as TOML.",
)
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.pass_context
def config_show_command(ctx: click.Context, path: Path | None) -> None:
    """Print the effective profile."""
    console = get_console(ctx)
    resolved = resolve_profile_for(ctx, _anchor(path))
    for layer, cfg in resolved.layers:
        console.info(f"# {layer.value}: {', '.join(cfg.set_fields())}")
    console.print(to_toml({Toml.SECTION_FORMAT: resolved.profile.to_toml_table()}), nl=False)


@config_group.command(
    name="path",
    help="Print the config files that apply, lowest precedence first.",
)
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.pass_context
def config_path_command(ctx: click.Context, path: Path | None) -> None:
    """Print discovered config files."""
    console = get_console(ctx)
    resolved = resolve_profile_for(ctx, _anchor(path))
    for config_file in resolved.config_files:
        console.print(str(config_file))
    if not resolved.config_files:
        console.info("No config files found; using built-in defaults.")
