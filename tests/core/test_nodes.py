# topmark:header:start
#
#   project      : FrontRange
#   file         : test_nodes.py
#   file_relpath : tests/core/test_nodes.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Unit tests for `frontrange.core.nodes`."""

from __future__ import annotations

import pytest

from frontrange.core.mapping import OrderedMapping
from frontrange.core.nodes import (
    AliasNode,
    CollectionStyle,
    MappingNode,
    ScalarNode,
    ScalarStyle,
    SequenceNode,
    node_kind,
    scalar_matches,
)


def test_scalar_equality_ignores_style_tag_and_anchor() -> None:
    """Two scalars with the same text are equal whatever their presentation."""
    plain = ScalarNode("42")
    quoted = ScalarNode("42", style=ScalarStyle.DOUBLE_QUOTED, tag="tag:yaml.org,2002:str")
    anchored = ScalarNode("42", anchor="answer")

    assert plain == quoted == anchored
    assert hash(plain) == hash(quoted) == hash(anchored)
    assert ScalarNode("42") != ScalarNode("43")


def test_collection_equality_is_structural() -> None:
    """Sequences and mappings compare by content, not by flow style."""
    block = SequenceNode((ScalarNode("a"), ScalarNode("b")), style=CollectionStyle.BLOCK)
    flow = SequenceNode((ScalarNode("a"), ScalarNode("b")), style=CollectionStyle.FLOW)
    assert block == flow
    assert block != SequenceNode((ScalarNode("b"), ScalarNode("a")))

    m1 = MappingNode(OrderedMapping([("k", ScalarNode("v"))]))
    m2 = MappingNode(OrderedMapping([("k", ScalarNode("v"))]), style=CollectionStyle.FLOW)
    assert m1 == m2


def test_with_items_keeps_presentation() -> None:
    """`with_items` swaps children but keeps style, tag and anchor."""
    seq = SequenceNode((ScalarNode("a"),), style=CollectionStyle.FLOW, anchor="list")
    new = seq.with_items((ScalarNode("b"),))
    assert new.items == (ScalarNode("b"),)
    assert new.style is CollectionStyle.FLOW
    assert new.anchor == "list"
    # The original is untouched
    assert seq.items == (ScalarNode("a"),)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("plain", ScalarStyle.PLAIN),
        ("single_quoted", ScalarStyle.SINGLE_QUOTED),
        ("singleQuoted", ScalarStyle.SINGLE_QUOTED),
        ("DOUBLE-QUOTED", ScalarStyle.DOUBLE_QUOTED),
        ("literal", ScalarStyle.LITERAL),
        ("folded", ScalarStyle.FOLDED),
        ("any", ScalarStyle.ANY),
        ("bogus", None),
        (None, None),
    ],
)
def test_scalar_style_from_name(token: str | None, expected: ScalarStyle | None) -> None:
    """Style tokens are matched ignoring case, dashes and underscores."""
    assert ScalarStyle.from_name(token) is expected


def test_collection_style_from_name() -> None:
    """Collection styles accept their lowercase and uppercase names."""
    assert CollectionStyle.from_name("flow") is CollectionStyle.FLOW
    assert CollectionStyle.from_name("BLOCK") is CollectionStyle.BLOCK
    assert CollectionStyle.from_name("inline") is None


def test_node_kind() -> None:
    """Each node variant reports a short kind name."""
    assert node_kind(ScalarNode("x")) == "scalar"
    assert node_kind(SequenceNode()) == "sequence"
    assert node_kind(MappingNode(OrderedMapping())) == "mapping"
    assert node_kind(AliasNode("a")) == "alias"


def test_scalar_matches() -> None:
    """Only scalars match; case folding is opt-in."""
    node = ScalarNode("Swift")
    assert scalar_matches(node, "Swift")
    assert not scalar_matches(node, "swift")
    assert scalar_matches(node, "swift", case_insensitive=True)
    assert scalar_matches(ScalarNode("STRASSE"), "straße", case_insensitive=True)
    assert not scalar_matches(SequenceNode((node,)), "Swift")
