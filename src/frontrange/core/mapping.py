# topmark:header:start
#
#   project      : FrontRange
#   file         : mapping.py
#   file_relpath : src/frontrange/core/mapping.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Ordered, immutable key/value container used for the front matter.

[`OrderedMapping`][frontrange.core.mapping.OrderedMapping] behaves like a read-only
`collections.abc.Mapping` whose keys are [`Node`][frontrange.core.nodes.Node] values.
Plain strings are accepted wherever a key is expected and are treated as
scalar keys with that text.

Invariants:
    - Keys are unique under node equality (scalars compare by text).
    - Iteration follows insertion order, or the order produced by the last
      explicit reorder (`reversed`, `sorted`).
    - Every "edit" returns a new instance; the receiver never changes.

Equality between two mappings is order-sensitive: the same pairs in a different
order are *not* equal, because key order is meaningful in front matter.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, Callable, Union

from frontrange.core.errors import IndexOutOfRange
from frontrange.core.nodes import AliasNode, MappingNode, ScalarNode, SequenceNode

if TYPE_CHECKING:
    from frontrange.core.nodes import Node

KeyLike = Union[str, "Node"]
Pair = tuple["Node", "Node"]


def as_key(key: KeyLike) -> Node:
    """Normalize a key argument: strings become plain scalar keys."""
    if isinstance(key, str):
        return ScalarNode(key)
    if isinstance(key, (ScalarNode, SequenceNode, MappingNode, AliasNode)):
        return key
    raise TypeError(f"mapping keys must be str or Node, not {type(key).__name__}")


def key_text(key: Node) -> str | None:
    """Return the text of a scalar key, or None for complex keys."""
    return key.text if isinstance(key, ScalarNode) else None


class OrderedMapping(Mapping["Node", "Node"]):
    """Insertion-ordered mapping of nodes with copy-on-write edits.

    Args:
        pairs (Iterable[tuple[KeyLike, Node]]): Initial pairs. A key repeated later in
            the iterable overwrites the earlier value in place, as `dict()` would.
    """

    __slots__ = ("_pairs", "_index")

    def __init__(self, pairs: Iterable[tuple[KeyLike, Node]] = ()) -> None:
        ordered: list[Pair] = []
        index: dict[Node, int] = {}
        for raw_key, value in pairs:
            key = as_key(raw_key)
            pos = index.get(key)
            if pos is None:
                index[key] = len(ordered)
                ordered.append((key, value))
            else:
                ordered[pos] = (ordered[pos][0], value)
        self._pairs: tuple[Pair, ...] = tuple(ordered)
        self._index: dict[Node, int] = index

    @classmethod
    def _from_unique(cls, pairs: tuple[Pair, ...]) -> OrderedMapping:
        # Fast path for pairs already known to hold unique keys
        new = cls.__new__(cls)
        new._pairs = pairs
        new._index = {k: i for i, (k, _) in enumerate(pairs)}
        return new

    # --- Mapping protocol ---------------------------------------------------

    def __getitem__(self, key: KeyLike) -> Node:
        return self._pairs[self._index[as_key(key)]][1]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, ScalarNode, SequenceNode, MappingNode, AliasNode)):
            return False
        return as_key(key) in self._index

    def __iter__(self) -> Iterator[Node]:
        return (k for k, _ in self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedMapping):
            return self._pairs == other._pairs
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._pairs)
        return f"OrderedMapping({{{inner}}})"

    # --- Queries ------------------------------------------------------------

    @property
    def pairs(self) -> tuple[Pair, ...]:
        """All (key, value) pairs in order."""
        return self._pairs

    def key_texts(self) -> list[str]:
        """Scalar key texts in order; complex keys are skipped."""
        return [k.text for k, _ in self._pairs if isinstance(k, ScalarNode)]

    def index_of(self, key: KeyLike) -> int | None:
        """Position of `key`, or None when absent."""
        return self._index.get(as_key(key))

    def pair_at(self, index: int) -> Pair:
        """Return the pair at `index`; raises IndexOutOfRange outside ``0 <= index < len``."""
        self._check_index(index)
        return self._pairs[index]

    # --- Copy-on-write edits -------------------------------------------------

    def with_item(self, key: KeyLike, value: Node) -> OrderedMapping:
        """Return a mapping where `key` is bound to `value`.

        An existing key keeps its position and original key node; a new key is
        appended at the end.
        """
        k = as_key(key)
        pos = self._index.get(k)
        if pos is None:
            return OrderedMapping._from_unique(self._pairs + ((k, value),))
        pairs = list(self._pairs)
        pairs[pos] = (pairs[pos][0], value)
        return OrderedMapping._from_unique(tuple(pairs))

    def pop(self, key: KeyLike) -> tuple[OrderedMapping, Node | None]:
        """Remove `key`, returning the new mapping and the removed value.

        When the key is absent the receiver itself is returned together with
        None, so callers can tell "removed" from "nothing to remove".
        """
        pos = self._index.get(as_key(key))
        if pos is None:
            return self, None
        removed = self._pairs[pos][1]
        return OrderedMapping._from_unique(self._pairs[:pos] + self._pairs[pos + 1 :]), removed

    def without(self, key: KeyLike) -> OrderedMapping:
        """Return a mapping without `key`; absent keys are a no-op."""
        return self.pop(key)[0]

    def remove_at(self, index: int) -> tuple[OrderedMapping, Pair]:
        """Remove the pair at `index`, returning the new mapping and the removed pair.

        Raises:
            IndexOutOfRange: If `index` is negative or not below ``len(self)``.
        """
        self._check_index(index)
        removed = self._pairs[index]
        return OrderedMapping._from_unique(self._pairs[:index] + self._pairs[index + 1 :]), removed

    def replace_key(self, old: KeyLike, new: KeyLike) -> OrderedMapping:
        """Rebind the value of `old` to `new`, keeping its position.

        Raises:
            KeyError: If `old` is absent.
            ValueError: If `new` is already present.
        """
        old_key, new_key = as_key(old), as_key(new)
        pos = self._index.get(old_key)
        if pos is None:
            raise KeyError(old_key)
        if new_key in self._index:
            raise ValueError(f"key already present: {new_key!r}")
        pairs = list(self._pairs)
        pairs[pos] = (new_key, pairs[pos][1])
        return OrderedMapping._from_unique(tuple(pairs))

    def reversed(self) -> OrderedMapping:
        """Return the pairs in reverse order."""
        return OrderedMapping._from_unique(self._pairs[::-1])

    def sorted(
        self,
        key: Callable[[Pair], Any] | None = None,
        *,
        reverse: bool = False,
    ) -> OrderedMapping:
        """Return a stably sorted copy.

        Args:
            key (Callable[[Pair], Any] | None): Sort key computed from each (key, value)
                pair. Defaults to [`default_sort_key`][frontrange.core.mapping.default_sort_key].
            reverse (bool): Sort descending. Ties keep their relative order.
        """
        return OrderedMapping._from_unique(
            tuple(sorted(self._pairs, key=key or default_sort_key, reverse=reverse))
        )

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._pairs):
            raise IndexOutOfRange(index, len(self._pairs))


def default_sort_key(pair: Pair) -> tuple[int, str]:
    """Order scalar keys alphabetically by text, after which complex keys keep their order."""
    text = key_text(pair[0])
    return (0, text) if text is not None else (1, "")


def length_sort_key(pair: Pair) -> tuple[int, int, str]:
    """Order scalar keys by text length, then alphabetically."""
    text = key_text(pair[0])
    return (0, len(text), text) if text is not None else (1, 0, "")
