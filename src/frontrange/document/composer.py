# topmark:header:start
#
#   project      : FrontRange
#   file         : composer.py
#   file_relpath : src/frontrange/document/composer.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Build FrontRange nodes from PyYAML parse events.

PyYAML's own composer produces `yaml.nodes.Node` objects but drops the
information about *where* each top-level entry sits, and it silently accepts
duplicate mapping keys. This composer walks the event stream directly so it
can:

- keep the scalar style and collection flow style of every node,
- resolve implicit tags the way `yaml.SafeLoader` would,
- reject duplicate keys, duplicate anchors, undefined or recursive aliases
  and multi-document streams with `yaml.composer.ComposerError`,
- report the character span of each top-level key/value pair.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

import yaml
from yaml.composer import ComposerError
from yaml.resolver import Resolver

from frontrange.config.logging import get_logger
from frontrange.core.mapping import OrderedMapping
from frontrange.core.nodes import (
    AliasNode,
    CollectionStyle,
    MappingNode,
    ScalarNode,
    ScalarStyle,
    SequenceNode,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from frontrange.config.logging import FrontRangeLogger
    from frontrange.core.nodes import Node

logger: FrontRangeLogger = get_logger(__name__)

SCALAR_STYLE_FROM_EVENT: Final[dict[str | None, ScalarStyle]] = {
    None: ScalarStyle.PLAIN,
    "": ScalarStyle.PLAIN,
    "'": ScalarStyle.SINGLE_QUOTED,
    '"': ScalarStyle.DOUBLE_QUOTED,
    "|": ScalarStyle.LITERAL,
    ">": ScalarStyle.FOLDED,
}

_RESOLVER: Final[Resolver] = Resolver()


def collection_style_from_event(flow_style: bool | None) -> CollectionStyle:
    """Translate PyYAML's `flow_style` flag into a CollectionStyle."""
    if flow_style is None:
        return CollectionStyle.ANY
    return CollectionStyle.FLOW if flow_style else CollectionStyle.BLOCK


@dataclass(frozen=True)
class KeySpan:
    """Character span of one top-level entry, relative to the composed text.

    Attributes:
        key (Node): The entry's key.
        start (int): Offset of the first character of the key.
        end (int): Offset just past the last character of the value.
    """

    key: Node
    start: int
    end: int


@dataclass(frozen=True)
class ComposedPreamble:
    """Result of composing one preamble.

    Attributes:
        root (Node | None): Root node, or None for an empty stream.
        key_spans (tuple[KeySpan, ...]): Spans of the root mapping's entries
            (empty when the root is not a mapping).
    """

    root: Node | None
    key_spans: tuple[KeySpan, ...] = field(default=())


class EventComposer:
    """Turn one YAML event stream into a single FrontRange node tree."""

    def __init__(self, events: Iterable[yaml.Event]) -> None:
        self._events: list[yaml.Event] = list(events)
        self._pos: int = 0
        self._anchors: set[str] = set()
        # Anchors of collections still being composed
        self._open: set[str] = set()
        self._spans: list[KeySpan] = []

    def _peek(self) -> yaml.Event:
        return self._events[self._pos]

    def _next(self) -> yaml.Event:
        event = self._events[self._pos]
        self._pos += 1
        return event

    def compose(self) -> ComposedPreamble:
        """Compose the stream; raises ComposerError on constructs FrontRange rejects."""
        self._next()  # StreamStartEvent
        if isinstance(self._peek(), yaml.StreamEndEvent):
            logger.trace("empty YAML stream")
            return ComposedPreamble(None)

        start = self._next()  # DocumentStartEvent
        root = self._compose_node(depth=0)
        self._next()  # DocumentEndEvent

        extra = self._peek()
        if not isinstance(extra, yaml.StreamEndEvent):
            raise ComposerError(
                "expected a single document in the front matter",
                start.start_mark,
                "but found another document",
                extra.start_mark,
            )
        return ComposedPreamble(root, tuple(self._spans))

    def _compose_node(self, depth: int) -> Node:
        event = self._peek()
        if isinstance(event, yaml.AliasEvent):
            self._next()
            if event.anchor not in self._anchors:
                raise ComposerError(
                    None, None, f"found undefined alias {event.anchor!r}", event.start_mark
                )
            if event.anchor in self._open:
                raise ComposerError(
                    None, None, f"found recursive alias {event.anchor!r}", event.start_mark
                )
            return AliasNode(event.anchor)

        anchor: str | None = getattr(event, "anchor", None)
        if anchor is not None:
            if anchor in self._anchors:
                raise ComposerError(
                    f"found duplicate anchor {anchor!r}", None, "redefined here", event.start_mark
                )
            self._anchors.add(anchor)

        if isinstance(event, yaml.ScalarEvent):
            return self._compose_scalar()
        if anchor is not None:
            self._open.add(anchor)
        node: Node
        if isinstance(event, yaml.SequenceStartEvent):
            node = self._compose_sequence(depth)
        else:
            node = self._compose_mapping(depth)
        if anchor is not None:
            self._open.discard(anchor)
        return node

    def _compose_scalar(self) -> ScalarNode:
        event: yaml.ScalarEvent = self._next()
        tag = event.tag
        if tag is None or tag == "!":
            tag = _RESOLVER.resolve(yaml.ScalarNode, event.value, event.implicit)
        return ScalarNode(
            event.value,
            style=SCALAR_STYLE_FROM_EVENT.get(event.style, ScalarStyle.PLAIN),
            tag=tag,
            anchor=event.anchor,
        )

    def _compose_sequence(self, depth: int) -> SequenceNode:
        start: yaml.SequenceStartEvent = self._next()
        tag = start.tag
        if tag is None or tag == "!":
            tag = _RESOLVER.resolve(yaml.SequenceNode, None, start.implicit)
        items: list[Node] = []
        while not isinstance(self._peek(), yaml.SequenceEndEvent):
            items.append(self._compose_node(depth + 1))
        self._next()
        return SequenceNode(
            tuple(items),
            style=collection_style_from_event(start.flow_style),
            tag=tag,
            anchor=start.anchor,
        )

    def _compose_mapping(self, depth: int) -> MappingNode:
        start: yaml.MappingStartEvent = self._next()
        tag = start.tag
        if tag is None or tag == "!":
            tag = _RESOLVER.resolve(yaml.MappingNode, None, start.implicit)
        pairs: list[tuple[Node, Node]] = []
        seen: set[Node] = set()
        while not isinstance(self._peek(), yaml.MappingEndEvent):
            key_event = self._peek()
            key = self._compose_node(depth + 1)
            if key in seen:
                raise ComposerError(
                    "while constructing a mapping",
                    start.start_mark,
                    f"found duplicate key {_describe(key)}",
                    key_event.start_mark,
                )
            seen.add(key)
            value = self._compose_node(depth + 1)
            if depth == 0:
                # The value's closing event is the one just consumed
                last_event = self._events[self._pos - 1]
                self._spans.append(
                    KeySpan(key, key_event.start_mark.index, last_event.end_mark.index)
                )
            pairs.append((key, value))
        self._next()
        return MappingNode(
            OrderedMapping(pairs),
            style=collection_style_from_event(start.flow_style),
            tag=tag,
            anchor=start.anchor,
        )


def _describe(key: Node) -> str:
    return repr(key.text) if isinstance(key, ScalarNode) else f"<{type(key).__name__}>"


def compose_preamble(text: str) -> ComposedPreamble:
    """Parse YAML `text` into a node tree.

    Raises:
        yaml.YAMLError: On any scanner, parser or composer error.
    """
    return EventComposer(yaml.parse(text, Loader=yaml.SafeLoader)).compose()
