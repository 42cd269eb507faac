# topmark:header:start
#
#   project      : FrontRange
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Tests for RenderProfile, PartialConfig and their TOML mapping."""

from __future__ import annotations

import pytest

from frontrange.config.io import parse_toml_text, to_toml
from frontrange.config.keys import Toml
from frontrange.config.model import DEFAULT_PROFILE, PartialConfig, RenderProfile
from frontrange.config.resolver import resolve
from frontrange.config.types import LineBreak
from frontrange.core.nodes import CollectionStyle, ScalarStyle
from tests.conftest import mark_config

pytestmark: pytest.MarkDecorator = pytest.mark.config


@mark_config
def test_defaults() -> None:
    """Built-in defaults: indent 2, no wrapping, plain LF output."""
    p = DEFAULT_PROFILE
    assert p.indent == 2
    assert p.width == -1
    assert p.line_break is LineBreak.LN
    assert not p.canonical
    assert not p.sort_keys
    assert p.scalar_style is ScalarStyle.ANY


@mark_config
def test_merge_is_last_wins_and_none_never_clears() -> None:
    """Later sources win per field; unset fields keep earlier values."""
    low = PartialConfig(indent=4, width=80)
    high = PartialConfig(indent=6)
    merged = low.merge_with(high)
    assert merged.indent == 6
    assert merged.width == 80
    assert merged.set_fields() == ["indent", "width"]


@mark_config
def test_resolve_precedence_skips_none() -> None:
    """`resolve` merges left to right and ignores missing layers."""
    profile = resolve(
        [PartialConfig(indent=4, width=10), None, PartialConfig(indent=6, sort_keys=True)]
    )
    assert profile == RenderProfile(indent=6, width=10, sort_keys=True)
    assert resolve([]) == DEFAULT_PROFILE


@mark_config
def test_empty_partial() -> None:
    """A fresh PartialConfig sets nothing and freezes to the defaults."""
    partial = PartialConfig()
    assert partial.is_empty()
    assert partial.freeze() == DEFAULT_PROFILE
    assert partial.to_toml_table() == {}


@mark_config
def test_from_toml_table_top_level_and_format_section() -> None:
    """Keys are read from the top level and from [format]; the table wins."""
    table = parse_toml_text(
        'indent = 3\nline_break = "CRLN"\n[format]\nindent = 5\nsequence_style = "flow"\n'
    )
    partial = PartialConfig.from_toml_table(table, where="test")
    assert partial.indent == 5
    assert partial.line_break is LineBreak.CRLN
    assert partial.sequence_style is CollectionStyle.FLOW
    assert partial.width is None


@mark_config
def test_enum_tokens_ignore_case_and_separators() -> None:
    """Style tokens accept dashes and any case."""
    partial = PartialConfig.from_toml_table({"scalar_style": "Double-Quoted"})
    assert partial.scalar_style is ScalarStyle.DOUBLE_QUOTED


@mark_config
@pytest.mark.parametrize(
    ("table", "fragment"),
    [
        ({"colour": True}, "unknown key"),
        ({"indent": "two"}, "expected integer"),
        ({"indent": True}, "expected integer"),
        ({"indent": 1}, "must be between 2 and 9"),
        ({"indent": 10}, "must be between 2 and 9"),
        ({"sort_keys": "yes"}, "expected bool"),
        ({"line_break": "lf"}, "invalid value"),
        ({"mapping_style": 1}, "expected string"),
        ({Toml.SECTION_FORMAT: 3}, "expected a table"),
    ],
)
def test_from_toml_table_rejects_bad_values(table: dict[str, object], fragment: str) -> None:
    """Unknown keys, wrong types and unknown tokens are errors."""
    with pytest.raises(ValueError, match=fragment):
        PartialConfig.from_toml_table(table)


@mark_config
def test_profile_survives_toml_round_trip() -> None:
    """A profile written as TOML reads back identically."""
    profile = RenderProfile(
        indent=4,
        width=72,
        allow_unicode=True,
        line_break=LineBreak.CR,
        mapping_style=CollectionStyle.BLOCK,
        scalar_style=ScalarStyle.SINGLE_QUOTED,
    )
    text = to_toml({Toml.SECTION_FORMAT: profile.to_toml_table()})
    assert text.startswith("[format]\n")
    assert 'line_break = "cr"' in text
    table = parse_toml_text(text)
    assert PartialConfig.from_toml_table(table).freeze() == profile


@mark_config
def test_thaw_sets_every_field() -> None:
    """Thawing a profile yields a builder with nothing left unset."""
    thawed = DEFAULT_PROFILE.thaw()
    assert len(thawed.set_fields()) == len(Toml.ALL_KEYS)
    assert thawed.freeze() == DEFAULT_PROFILE


@mark_config
def test_line_break_chars() -> None:
    """Each convention maps to its characters."""
    assert LineBreak.LN.chars == "\n"
    assert LineBreak.CR.chars == "\r"
    assert LineBreak.CRLN.chars == "\r\n"
