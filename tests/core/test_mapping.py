# topmark:header:start
#
#   project      : FrontRange
#   file         : test_mapping.py
#   file_relpath : tests/core/test_mapping.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Unit tests for `frontrange.core.mapping.OrderedMapping`."""

from __future__ import annotations

import pytest

from frontrange.core.errors import IndexOutOfRange
from frontrange.core.mapping import OrderedMapping, default_sort_key, length_sort_key
from frontrange.core.nodes import ScalarNode, SequenceNode


def _m(*pairs: tuple[str, str]) -> OrderedMapping:
    return OrderedMapping((k, ScalarNode(v)) for k, v in pairs)


def test_insertion_order_and_lookup() -> None:
    """Iteration follows insertion order; string keys work as scalar keys."""
    m = _m(("b", "1"), ("a", "2"), ("c", "3"))
    assert m.key_texts() == ["b", "a", "c"]
    assert m["a"] == ScalarNode("2")
    assert m[ScalarNode("a")] == ScalarNode("2")
    assert "c" in m
    assert "z" not in m
    assert 42 not in m
    assert len(m) == 3


def test_repeated_key_in_constructor_overwrites_in_place() -> None:
    """A repeated key keeps its first position but takes the later value."""
    m = _m(("a", "1"), ("b", "2"), ("a", "3"))
    assert m.key_texts() == ["a", "b"]
    assert m["a"] == ScalarNode("3")


def test_with_item_replaces_in_place_or_appends() -> None:
    """Existing keys keep their position; new keys go last; the receiver is unchanged."""
    m = _m(("a", "1"), ("b", "2"))
    replaced = m.with_item("a", ScalarNode("9"))
    appended = m.with_item("c", ScalarNode("3"))

    assert replaced.key_texts() == ["a", "b"]
    assert replaced["a"] == ScalarNode("9")
    assert appended.key_texts() == ["a", "b", "c"]
    assert m["a"] == ScalarNode("1")
    assert "c" not in m


def test_equality_is_order_sensitive() -> None:
    """Same pairs in a different order are different mappings."""
    assert _m(("a", "1"), ("b", "2")) == _m(("a", "1"), ("b", "2"))
    assert _m(("a", "1"), ("b", "2")) != _m(("b", "2"), ("a", "1"))


def test_pop_absent_returns_receiver() -> None:
    """Popping an absent key returns the same instance and None."""
    m = _m(("a", "1"))
    same, removed = m.pop("zzz")
    assert same is m
    assert removed is None

    smaller, removed = m.pop("a")
    assert len(smaller) == 0
    assert removed == ScalarNode("1")


def test_remove_at_bounds() -> None:
    """`remove_at` accepts 0..len-1 and raises IndexOutOfRange otherwise."""
    m = _m(("a", "1"), ("b", "2"))
    rest, (key, value) = m.remove_at(1)
    assert rest.key_texts() == ["a"]
    assert key == ScalarNode("b")
    assert value == ScalarNode("2")

    with pytest.raises(IndexOutOfRange) as exc_info:
        m.remove_at(2)
    assert exc_info.value.index == 2
    assert exc_info.value.length == 2
    with pytest.raises(IndexError):
        m.remove_at(-1)


def test_replace_key_keeps_position() -> None:
    """Renaming keeps the entry where it was."""
    m = _m(("a", "1"), ("b", "2"), ("c", "3"))
    renamed = m.replace_key("b", "beta")
    assert renamed.key_texts() == ["a", "beta", "c"]
    assert renamed["beta"] == ScalarNode("2")

    with pytest.raises(KeyError):
        m.replace_key("missing", "x")
    with pytest.raises(ValueError, match="already present"):
        m.replace_key("a", "c")


def test_reversed_and_sorted() -> None:
    """Reordering helpers return new mappings."""
    m = _m(("banana", "1"), ("fig", "2"), ("apple", "3"), ("kiwi", "4"))
    assert m.reversed().key_texts() == ["kiwi", "apple", "fig", "banana"]
    assert m.sorted().key_texts() == ["apple", "banana", "fig", "kiwi"]
    assert m.sorted(reverse=True).key_texts() == ["kiwi", "fig", "banana", "apple"]
    assert m.sorted(length_sort_key).key_texts() == ["fig", "kiwi", "apple", "banana"]
    assert m.key_texts() == ["banana", "fig", "apple", "kiwi"]


def test_sort_keys_for_complex_keys_go_last() -> None:
    """Complex keys sort after scalar keys and keep their relative order."""
    complex_key = SequenceNode((ScalarNode("x"),))
    m = OrderedMapping([(complex_key, ScalarNode("1")), ("b", ScalarNode("2"))])
    ordered = m.sorted(default_sort_key)
    assert list(ordered) == [ScalarNode("b"), complex_key]
    assert m.key_texts() == ["b"]


def test_as_key_rejects_other_types() -> None:
    """Only strings and nodes are valid keys."""
    with pytest.raises(TypeError):
        OrderedMapping([(42, ScalarNode("x"))])  # type: ignore[list-item]


def test_positional_lookup() -> None:
    """Keys map to positions and positions to pairs."""
    m = _m(("a", "1"), ("b", "2"))
    assert m.index_of("b") == 1
    assert m.index_of("zzz") is None
    assert m.pair_at(0) == (ScalarNode("a"), ScalarNode("1"))
    with pytest.raises(IndexOutOfRange):
        m.pair_at(-1)
