# topmark:header:start
#
#   project      : FrontRange
#   file         : io.py
#   file_relpath : src/frontrange/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""TOML parsing, rendering and typed value getters for config files.

Unlike a lenient loader, every helper here *raises* on malformed input: a
config file that exists but cannot be understood must abort resolution.

- Syntax errors surface as ``tomlkit.exceptions.ParseError``.
- Type and enum errors surface as `ValueError` with the TOML location in the
  message; [`frontrange.config.discovery`][frontrange.config.discovery] wraps both
  into [`ConfigFileError`][frontrange.core.errors.ConfigFileError] with the path.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar, cast

import tomlkit

from frontrange.config.logging import get_logger

if TYPE_CHECKING:
    from frontrange.config.logging import FrontRangeLogger

TomlTable = dict[str, Any]

E = TypeVar("E", bound=Enum)

logger: FrontRangeLogger = get_logger(__name__)


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into plain Python values.

    Raises:
        tomlkit.exceptions.ParseError: If the text is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data: Any = doc.unwrap()
    return cast("TomlTable", data)


def to_toml(table: TomlTable) -> str:
    """Serialize a mapping of primitives to TOML text, skipping None values."""
    return tomlkit.dumps({k: v for k, v in table.items() if v is not None})


def get_bool_or_none(table: TomlTable, key: str, *, where: str) -> bool | None:
    """Return ``table[key]`` as a bool, or None when missing."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise ValueError(f"expected bool in {where}.{key}, got {type(value).__name__}: {value!r}")


def get_int_or_none(table: TomlTable, key: str, *, where: str) -> int | None:
    """Return ``table[key]`` as an int, or None when missing.

    `bool` is rejected even though it is an `int` subclass.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise ValueError(f"expected integer in {where}.{key}, got {type(value).__name__}: {value!r}")


def get_enum_or_none(table: TomlTable, key: str, enum_cls: type[E], *, where: str) -> E | None:
    """Return ``table[key]`` parsed via the enum's ``from_name`` lookup, or None when missing."""
    raw: Any = table.get(key)
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ValueError(
            f"expected string in {where}.{key}, got {type(raw).__name__}: {raw!r}"
        )
    member = cast("E | None", getattr(enum_cls, "from_name")(raw))
    if member is None:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise ValueError(f"invalid value for {where}.{key}: {raw!r} (allowed: {allowed})")
    logger.trace("%s.%s = %s", where, key, member.value)
    return member
