# topmark:header:start
#
#   project      : FrontRange
#   file         : cli_types.py
#   file_relpath : src/frontrange/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Custom Click parameter types and small shared enums for the CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """How values are printed by query commands."""

    JSON = "json"
    YAML = "yaml"
    PLAIN = "plain"


class DumpFormat(str, Enum):
    """How `fr dump` prints a whole front matter block."""

    JSON = "json"
    YAML = "yaml"
    RAW = "raw"
    PLIST = "plist"


class MultiFormat(str, Enum):
    """How `fr dump` combines the output for several files."""

    CAT = "cat"
    JSON = "json"
    YAML = "yaml"
    PLIST = "plist"


class DataFormat(str, Enum):
    """Input format of replacement data for `fr replace`."""

    JSON = "json"
    YAML = "yaml"
    PLIST = "plist"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type converting a token to a member of `enum_cls`.

    Matching uses the enum's ``from_name`` classmethod when it has one (so
    ``singleQuoted`` and ``single_quoted`` are both accepted) and falls back to
    a case-insensitive comparison with member values.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.choices: list[str] = [str(e.value) for e in enum_cls]

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Convert a command-line token to an enum member."""
        if isinstance(value, self.enum_cls):
            return value

        from_name = getattr(self.enum_cls, "from_name", None)
        member: E | None = from_name(str(value)) if from_name is not None else None
        if member is None:
            lookup = {str(e.value).lower(): e for e in self.enum_cls}
            member = lookup.get(str(value).lower())
        if member is None:
            self.fail(
                f"Invalid value {value!r}. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self, ctx: click.Context, param: click.Parameter, incomplete: str
    ) -> list[CompletionItem]:
        """Complete enum values starting with `incomplete`."""
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = incomplete.lower()
        return [RuntimeCompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the choices in help output."""
        return f"[{'|'.join(self.choices)}]"

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
