# topmark:header:start
#
#   project      : FrontRange
#   file         : test_convert.py
#   file_relpath : tests/document/test_convert.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Tests for conversions between nodes, Python values and JSON/YAML text."""

from __future__ import annotations

import datetime

import pytest

from frontrange.core.mapping import OrderedMapping
from frontrange.core.nodes import (
    AliasNode,
    MappingNode,
    ScalarNode,
    ScalarStyle,
    SequenceNode,
)
from frontrange.document.convert import (
    mapping_from_python,
    node_from_python,
    node_to_python,
    parse_data,
    to_json,
    to_plist,
)


def test_node_from_python_scalars() -> None:
    """Python scalars are represented like the YAML safe dumper does."""
    assert node_from_python("x") == ScalarNode("x")
    assert node_from_python(3) == ScalarNode("3")
    assert node_from_python(True) == ScalarNode("true")
    assert node_from_python(None) == ScalarNode("null")
    assert node_to_python(node_from_python("42")) == "42"


def test_node_from_python_collections_keep_order() -> None:
    """Dict order is kept and nested values become nodes."""
    node = node_from_python({"b": [1, 2], "a": {"x": None}})
    assert isinstance(node, MappingNode)
    assert node.mapping.key_texts() == ["b", "a"]
    assert isinstance(node.mapping["b"], SequenceNode)
    assert node_to_python(node) == {"b": [1, 2], "a": {"x": None}}


def test_nodes_pass_through() -> None:
    """Existing nodes are returned unchanged."""
    node = ScalarNode("x", style=ScalarStyle.LITERAL)
    assert node_from_python(node) is node
    mapping = OrderedMapping([("k", node)])
    wrapped = node_from_python(mapping)
    assert isinstance(wrapped, MappingNode)
    assert wrapped.mapping is mapping


def test_mapping_from_python_requires_a_dict() -> None:
    """Non-mapping values are rejected."""
    assert mapping_from_python({"a": 1}).key_texts() == ["a"]
    with pytest.raises(TypeError):
        mapping_from_python([1, 2])


def test_node_to_python_resolves_aliases() -> None:
    """An alias resolves to the same object as its anchor."""
    shared = SequenceNode((ScalarNode("1"),), anchor="s")
    root = MappingNode(OrderedMapping([("a", shared), ("b", AliasNode("s"))]))
    value = node_to_python(root)
    assert value == {"a": [1], "b": [1]}
    assert value["a"] is value["b"]


def test_node_to_python_undefined_alias() -> None:
    """An alias without an anchor in the tree is an error."""
    with pytest.raises(ValueError):
        node_to_python(AliasNode("nope"))


def test_to_json() -> None:
    """Dates and other non-JSON values are written as strings."""
    assert to_json({"d": datetime.date(2024, 1, 2)}, indent=None) == '{"d": "2024-01-02"}'
    assert to_json({"name": "café"}, indent=None) == '{"name": "café"}'
    assert to_json([1], indent=2) == "[\n  1\n]"


def test_parse_data_json() -> None:
    """JSON text becomes a node tree."""
    node = parse_data('{"title": "T", "n": 1}', "json")
    assert isinstance(node, MappingNode)
    assert node_to_python(node) == {"title": "T", "n": 1}


def test_parse_data_yaml_keeps_styles() -> None:
    """YAML text keeps the styles it was written with."""
    node = parse_data("title: 'T'\ntags: [a, b]\n", "yaml")
    assert isinstance(node, MappingNode)
    title = node.mapping["title"]
    assert isinstance(title, ScalarNode)
    assert title.style is ScalarStyle.SINGLE_QUOTED


def test_parse_data_empty_yaml_is_empty_mapping() -> None:
    """Empty YAML input is an empty mapping."""
    node = parse_data("", "yaml")
    assert isinstance(node, MappingNode)
    assert len(node) == 0


@pytest.mark.parametrize(
    ("text", "data_format"),
    [
        ("{not json", "json"),
        ("a: [1", "yaml"),
        ("a: 1\na: 2\n", "yaml"),
        ("<plist><dict><key>a</key>", "plist"),
        ("not a plist", "plist"),
    ],
)
def test_parse_data_invalid(text: str, data_format: str) -> None:
    """Unparseable input raises ValueError."""
    with pytest.raises(ValueError):
        parse_data(text, data_format)


def test_node_to_python_looks_up_anchors_in_context() -> None:
    """A bare alias resolves when the surrounding preamble is given as context."""
    shared = MappingNode(OrderedMapping([("x", ScalarNode("1"))]), anchor="b")
    root = MappingNode(OrderedMapping([("base", shared), ("copy", AliasNode("b"))]))
    assert node_to_python(AliasNode("b"), root) == {"x": 1}
    with pytest.raises(ValueError, match="undefined alias 'b'"):
        node_to_python(AliasNode("b"))


def test_node_to_python_handles_self_reference() -> None:
    """A hand-built collection containing its own alias converts to a cyclic value."""
    loop = SequenceNode((ScalarNode("1"), AliasNode("l")), anchor="l")
    value = node_to_python(loop)
    assert value[0] == 1
    assert value[1] is value


def test_to_plist() -> None:
    """Values become an XML property list; nulls are left out and dates get a time."""
    out = to_plist({"title": "T", "n": 2, "none": None, "d": datetime.date(2024, 1, 2)})
    assert out.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<key>title</key>\n\t<string>T</string>" in out
    assert "<integer>2</integer>" in out
    assert "<date>2024-01-02T00:00:00Z</date>" in out
    assert "none" not in out


def test_parse_data_plist() -> None:
    """Property list text becomes a node tree in document order."""
    node = parse_data(to_plist({"title": "T", "tags": ["a", "b"]}), "plist")
    assert isinstance(node, MappingNode)
    assert node.mapping.key_texts() == ["title", "tags"]
    assert node_to_python(node) == {"title": "T", "tags": ["a", "b"]}
