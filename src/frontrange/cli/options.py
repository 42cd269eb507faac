# topmark:header:start
#
#   project      : FrontRange
#   file         : options.py
#   file_relpath : src/frontrange/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Reusable Click option groups for the `fr` CLI.

Option groups are plain decorators, so a command declares what it needs:

- `common_verbose_options`: ``-v/--verbose`` and ``-q/--quiet``.
- `common_color_options`: ``--color`` and ``--no-color``.
- `common_format_options`: the eleven formatting overrides, which form the
  highest-precedence configuration layer.
- `paths_argument`: one or more input files.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, TypeVar

import click

from frontrange.cli.cli_types import EnumChoiceParam
from frontrange.cli.errors import FrontRangeUsageError
from frontrange.config.keys import Toml
from frontrange.config.model import PartialConfig
from frontrange.config.types import LineBreak
from frontrange.constants import MAX_INDENT, MIN_INDENT
from frontrange.core.nodes import CollectionStyle, ScalarStyle

if TYPE_CHECKING:
    from collections.abc import Mapping

F = TypeVar("F", bound=Callable[..., Any])


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Return program-output verbosity: positive for ``-v``, negative for ``-q``.

    Raises:
        FrontRangeUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FrontRangeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: F) -> F:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Report progress on stderr. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress warnings.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Decide whether to emit ANSI color.

    Honors ``--color``, then the ``FORCE_COLOR`` and ``NO_COLOR`` environment
    variables, and finally whether stdout is a terminal.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: F) -> F:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_format_options(f: F) -> F:
    """Add the per-invocation formatting overrides.

    Boolean flags default to None (unset), so a config file value survives
    unless the flag is given explicitly.
    """
    options: list[Callable[[F], F]] = [
        click.option(
            "--canonical/--no-canonical",
            default=None,
            help="Emit YAML canonical form.",
        ),
        click.option(
            "--indent",
            type=click.IntRange(MIN_INDENT, MAX_INDENT),
            default=None,
            help=f"Block indentation width ({MIN_INDENT}-{MAX_INDENT}).",
        ),
        click.option(
            "--width",
            type=int,
            default=None,
            help="Preferred line width; -1 disables wrapping.",
        ),
        click.option(
            "--allow-unicode/--escape-unicode",
            default=None,
            help="Write non-ASCII characters as-is instead of escaping them.",
        ),
        click.option(
            "--line-break",
            type=EnumChoiceParam(LineBreak),
            default=None,
            help="Line break convention inside the front matter.",
        ),
        click.option(
            "--explicit-start/--no-explicit-start",
            default=None,
            help="Emit a %YAML directive and '---' start marker inside the front matter.",
        ),
        click.option(
            "--explicit-end/--no-explicit-end",
            default=None,
            help="Emit a '...' end marker inside the front matter.",
        ),
        click.option(
            "--sort-keys/--no-sort-keys",
            default=None,
            help="Sort keys at every level when writing.",
        ),
        click.option(
            "--sequence-style",
            type=EnumChoiceParam(CollectionStyle),
            default=None,
            help="Force block or flow sequences.",
        ),
        click.option(
            "--mapping-style",
            type=EnumChoiceParam(CollectionStyle),
            default=None,
            help="Force block or flow mappings.",
        ),
        click.option(
            "--scalar-style",
            type=EnumChoiceParam(ScalarStyle),
            default=None,
            help="Force a scalar quoting style.",
        ),
        click.option(
            "--no-config",
            "no_config",
            is_flag=True,
            help="Ignore global and project config files.",
        ),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def overrides_from_options(kwargs: Mapping[str, Any]) -> PartialConfig:
    """Build the override layer from the parsed formatting options."""
    return PartialConfig(**{key: kwargs.get(key) for key in sorted(Toml.ALL_KEYS)})


def paths_argument(f: F) -> F:
    """Add a required, variadic PATHS argument of existing files."""
    return click.argument(
        "paths",
        nargs=-1,
        required=True,
        type=click.Path(dir_okay=False, path_type=str),
    )(f)
