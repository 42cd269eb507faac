# topmark:header:start
#
#   project      : FrontRange
#   file         : nodes.py
#   file_relpath : src/frontrange/core/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Immutable YAML value tree used for front matter.

A [`Node`][frontrange.core.nodes.Node] is one of four frozen dataclasses:

- [`ScalarNode`][frontrange.core.nodes.ScalarNode]: the scalar's source text plus the
  quoting style it was written with.
- [`SequenceNode`][frontrange.core.nodes.SequenceNode]: a tuple of child nodes.
- [`MappingNode`][frontrange.core.nodes.MappingNode]: an
  [`OrderedMapping`][frontrange.core.mapping.OrderedMapping] of key/value nodes.
- [`AliasNode`][frontrange.core.nodes.AliasNode]: a reference to an anchor defined
  elsewhere in the same preamble.

Style, tag and anchor are presentation details. They are carried through a
round trip but excluded from equality and hashing, so two scalars are equal
exactly when their text is equal.

Nodes are immutable; sharing a subtree between documents is always safe.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, TypeVar, Union

if TYPE_CHECKING:
    from frontrange.core.mapping import OrderedMapping

E = TypeVar("E", bound=Enum)


class ScalarStyle(str, Enum):
    """Quoting style of a scalar. ``ANY`` lets the emitter choose."""

    ANY = "any"
    PLAIN = "plain"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"
    LITERAL = "literal"
    FOLDED = "folded"

    @classmethod
    def from_name(cls, key_name: str | None) -> ScalarStyle | None:
        """Return the member for a token such as ``"plain"`` or ``"singleQuoted"``.

        Both snake_case and camelCase tokens are accepted; matching is
        case-insensitive. Returns None for None or unknown tokens.
        """
        return enum_from_token(cls, key_name)


class CollectionStyle(str, Enum):
    """Layout of a sequence or mapping. ``ANY`` lets the emitter choose."""

    ANY = "any"
    BLOCK = "block"
    FLOW = "flow"

    @classmethod
    def from_name(cls, key_name: str | None) -> CollectionStyle | None:
        """Return the member for a case-insensitive token, or None if unmatched."""
        return enum_from_token(cls, key_name)


def enum_from_token(cls: type[E], key_name: str | None) -> E | None:
    """Look up an enum member by value, ignoring case, dashes and underscores."""
    if key_name is None:
        return None
    token = key_name.strip().replace("-", "").replace("_", "").lower()
    for member in cls:
        if str(member.value).replace("_", "") == token:
            return member
    return None


@dataclass(frozen=True, slots=True)
class ScalarNode:
    """A scalar value stored as its unescaped text.

    Attributes:
        text (str): The scalar content, without quotes or escapes.
        style (ScalarStyle): Style the scalar was parsed with, or the style to emit.
        tag (str | None): Explicit or resolved YAML tag; None means "resolve from text".
        anchor (str | None): Anchor name defined on this node, if any.
    """

    text: str
    style: ScalarStyle = field(default=ScalarStyle.ANY, compare=False)
    tag: str | None = field(default=None, compare=False)
    anchor: str | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class SequenceNode:
    """An ordered list of nodes."""

    items: tuple[Node, ...] = ()
    style: CollectionStyle = field(default=CollectionStyle.ANY, compare=False)
    tag: str | None = field(default=None, compare=False)
    anchor: str | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.items)

    def with_items(self, items: tuple[Node, ...]) -> SequenceNode:
        """Return a copy holding `items`, keeping style, tag and anchor."""
        return SequenceNode(items, style=self.style, tag=self.tag, anchor=self.anchor)


@dataclass(frozen=True, slots=True)
class MappingNode:
    """A nested mapping."""

    mapping: OrderedMapping
    style: CollectionStyle = field(default=CollectionStyle.ANY, compare=False)
    tag: str | None = field(default=None, compare=False)
    anchor: str | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.mapping)

    def with_mapping(self, mapping: OrderedMapping) -> MappingNode:
        """Return a copy holding `mapping`, keeping style, tag and anchor."""
        return MappingNode(mapping, style=self.style, tag=self.tag, anchor=self.anchor)


@dataclass(frozen=True, slots=True)
class AliasNode:
    """A reference (``*name``) to the node carrying anchor ``name``."""

    anchor: str


Node = Union[ScalarNode, SequenceNode, MappingNode, AliasNode]


def node_kind(node: Node) -> str:
    """Return a short human-readable kind name: scalar, sequence, mapping or alias."""
    match node:
        case ScalarNode():
            return "scalar"
        case SequenceNode():
            return "sequence"
        case MappingNode():
            return "mapping"
        case AliasNode():
            return "alias"


def scalar_matches(node: Node, text: str, *, case_insensitive: bool = False) -> bool:
    """Return True if `node` is a scalar whose text equals `text`.

    Non-scalar nodes never match. With `case_insensitive`, both sides are
    compared after ``str.casefold()``.
    """
    if not isinstance(node, ScalarNode):
        return False
    if case_insensitive:
        return node.text.casefold() == text.casefold()
    return node.text == text
