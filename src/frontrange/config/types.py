# topmark:header:start
#
#   project      : FrontRange
#   file         : types.py
#   file_relpath : src/frontrange/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Small enums shared by the config layer and the CLI."""

from __future__ import annotations

from enum import Enum

from frontrange.core.nodes import enum_from_token


class LineBreak(str, Enum):
    """Line break convention used when emitting the preamble."""

    LN = "ln"
    CR = "cr"
    CRLN = "crln"

    @property
    def chars(self) -> str:
        """The actual line break characters."""
        return {"ln": "\n", "cr": "\r", "crln": "\r\n"}[self.value]

    @classmethod
    def from_name(cls, key_name: str | None) -> LineBreak | None:
        """Return the member for a case-insensitive token, or None if unmatched."""
        return enum_from_token(cls, key_name)


class ConfigLayer(str, Enum):
    """Where a configuration layer came from, lowest precedence first."""

    DEFAULTS = "defaults"
    GLOBAL = "global"
    PROJECT = "project"
    OVERRIDES = "overrides"
