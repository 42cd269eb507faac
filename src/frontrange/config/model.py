# topmark:header:start
#
#   project      : FrontRange
#   file         : model.py
#   file_relpath : src/frontrange/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Rendering configuration model and merge policy.

This module defines:
    - `RenderProfile`: the immutable, fully-resolved set of eleven formatting
      options consumed by the printer.
    - `PartialConfig`: a mutable builder in which every field is tri-state
      (``None`` means "inherit"). One instance represents the opinion of one
      configuration source.

Merge policy:
    `PartialConfig.merge_with` applies another source on top of the current one
    (last-wins per field). ``None`` in the overriding source never clears a value
    set earlier, so non-overlapping fields from different sources all survive.

TOML mapping (top level or under ``[format]``)::

    canonical = false
    indent = 2
    width = -1            # -1: no line wrapping
    allow_unicode = false
    line_break = "ln"     # ln | cr | crln
    explicit_start = false
    explicit_end = false
    sort_keys = false
    sequence_style = "any"  # any | block | flow
    mapping_style = "any"   # any | block | flow
    scalar_style = "any"    # any | plain | single_quoted | double_quoted | literal | folded

Filesystem discovery lives in [`frontrange.config.discovery`][frontrange.config.discovery];
layer resolution in [`frontrange.config.resolver`][frontrange.config.resolver].
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from frontrange.config.io import get_bool_or_none, get_enum_or_none, get_int_or_none
from frontrange.config.keys import Toml
from frontrange.config.types import LineBreak
from frontrange.constants import MAX_INDENT, MIN_INDENT
from frontrange.core.nodes import CollectionStyle, ScalarStyle

if TYPE_CHECKING:
    from collections.abc import Mapping

    from frontrange.config.io import TomlTable


# ------------------ Immutable runtime profile ------------------


@dataclass(frozen=True, slots=True)
class RenderProfile:
    """Fully-specified formatting options for emitting a preamble.

    Attributes:
        canonical (bool): Emit YAML canonical form (explicit tags, flow collections).
        indent (int): Block indentation width; the emitter honours values 2 to 9.
        width (int): Preferred maximum line width; ``-1`` disables wrapping.
        allow_unicode (bool): Write non-ASCII characters as-is instead of escaping them.
        line_break (LineBreak): Line break convention inside the preamble.
        explicit_start (bool): Emit a ``%YAML 1.1`` directive and ``---`` start marker.
        explicit_end (bool): Emit a ``...`` document end marker.
        sort_keys (bool): Sort mapping keys (at every level) before emission.
        sequence_style (CollectionStyle): Force block or flow sequences; ``ANY`` keeps
            each node's own style.
        mapping_style (CollectionStyle): Same for mappings.
        scalar_style (ScalarStyle): Force a scalar quoting style; ``ANY`` keeps each
            node's own style.
    """

    canonical: bool = False
    indent: int = 2
    width: int = -1
    allow_unicode: bool = False
    line_break: LineBreak = LineBreak.LN
    explicit_start: bool = False
    explicit_end: bool = False
    sort_keys: bool = False
    sequence_style: CollectionStyle = CollectionStyle.ANY
    mapping_style: CollectionStyle = CollectionStyle.ANY
    scalar_style: ScalarStyle = ScalarStyle.ANY

    def thaw(self) -> PartialConfig:
        """Return a builder with every field set from this profile."""
        return PartialConfig(**{f.name: getattr(self, f.name) for f in fields(self)})

    def to_toml_table(self) -> TomlTable:
        """Serialize all fields to a TOML-friendly dict (enums as their tokens)."""
        return self.thaw().to_toml_table()


DEFAULT_PROFILE: RenderProfile = RenderProfile()


# ------------------ Mutable tri-state builder ------------------


@dataclass
class PartialConfig:
    """One configuration source's formatting preferences.

    Every attribute mirrors `RenderProfile`; ``None`` means "not specified here".
    """

    canonical: bool | None = None
    indent: int | None = None
    width: int | None = None
    allow_unicode: bool | None = None
    line_break: LineBreak | None = None
    explicit_start: bool | None = None
    explicit_end: bool | None = None
    sort_keys: bool | None = None
    sequence_style: CollectionStyle | None = None
    mapping_style: CollectionStyle | None = None
    scalar_style: ScalarStyle | None = None

    def is_empty(self) -> bool:
        """Return True when no field is set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def set_fields(self) -> list[str]:
        """Names of the fields this source sets, in declaration order."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def merge_with(self, other: PartialConfig) -> PartialConfig:
        """Return a new PartialConfig by applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.
        """
        merged: dict[str, Any] = {}
        for f in fields(self):
            override = getattr(other, f.name)
            merged[f.name] = override if override is not None else getattr(self, f.name)
        return PartialConfig(**merged)

    def resolve(self, base: RenderProfile = DEFAULT_PROFILE) -> RenderProfile:
        """Fill unset fields from ``base`` and return a frozen profile."""
        values: dict[str, Any] = {}
        for f in fields(self):
            own = getattr(self, f.name)
            values[f.name] = getattr(base, f.name) if own is None else own
        return RenderProfile(**values)

    def freeze(self) -> RenderProfile:
        """Resolve against the built-in defaults."""
        return self.resolve(DEFAULT_PROFILE)

    @classmethod
    def from_toml_table(
        cls, tbl: Mapping[str, Any] | None, *, where: str = "config"
    ) -> PartialConfig:
        """Create a PartialConfig from a parsed TOML table.

        Keys are read from the top level, and from a ``[format]`` table when
        present (the table wins on conflict). Unspecified keys become ``None``.

        Raises:
            ValueError: On an unknown key, a value of the wrong type, an
                unknown enum token or an indent outside the honoured range.
        """
        if not tbl:
            return cls()

        table: dict[str, Any] = {k: v for k, v in tbl.items() if k != Toml.SECTION_FORMAT}
        section: Any = tbl.get(Toml.SECTION_FORMAT)
        if section is not None:
            if not isinstance(section, dict):
                raise ValueError(f"expected a table in {where}.{Toml.SECTION_FORMAT}")
            table.update(section)

        unknown = sorted(set(table) - Toml.ALL_KEYS)
        if unknown:
            raise ValueError(f"unknown key(s) in {where}: {', '.join(unknown)}")

        indent = get_int_or_none(table, Toml.KEY_INDENT, where=where)
        if indent is not None and not MIN_INDENT <= indent <= MAX_INDENT:
            raise ValueError(
                f"{where}.{Toml.KEY_INDENT} must be between {MIN_INDENT} and {MAX_INDENT}, "
                f"got {indent}"
            )

        return cls(
            canonical=get_bool_or_none(table, Toml.KEY_CANONICAL, where=where),
            indent=indent,
            width=get_int_or_none(table, Toml.KEY_WIDTH, where=where),
            allow_unicode=get_bool_or_none(table, Toml.KEY_ALLOW_UNICODE, where=where),
            line_break=get_enum_or_none(table, Toml.KEY_LINE_BREAK, LineBreak, where=where),
            explicit_start=get_bool_or_none(table, Toml.KEY_EXPLICIT_START, where=where),
            explicit_end=get_bool_or_none(table, Toml.KEY_EXPLICIT_END, where=where),
            sort_keys=get_bool_or_none(table, Toml.KEY_SORT_KEYS, where=where),
            sequence_style=get_enum_or_none(
                table, Toml.KEY_SEQUENCE_STYLE, CollectionStyle, where=where
            ),
            mapping_style=get_enum_or_none(
                table, Toml.KEY_MAPPING_STYLE, CollectionStyle, where=where
            ),
            scalar_style=get_enum_or_none(table, Toml.KEY_SCALAR_STYLE, ScalarStyle, where=where),
        )

    def to_toml_table(self) -> TomlTable:
        """Serialize only explicitly set keys to a TOML-friendly dict."""
        out: TomlTable = {}
        for name in self.set_fields():
            value = getattr(self, name)
            if isinstance(value, (LineBreak, CollectionStyle, ScalarStyle)):
                value = value.value
            out[name] = value
        return out
