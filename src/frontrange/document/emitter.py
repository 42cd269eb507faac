# topmark:header:start
#
#   project      : FrontRange
#   file         : emitter.py
#   file_relpath : src/frontrange/document/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Serialize FrontRange nodes to YAML text through PyYAML's emitter.

The node tree is translated into a PyYAML event stream which `yaml.emit`
writes out. Style choices follow the render profile; where a requested style
cannot represent a value exactly (a plain scalar with a line break, a plain
``"123"`` that must stay a string, a block scalar inside a flow collection),
PyYAML's emitter falls back to the next style that can. That fallback depends
only on the value and its context, so the same input always renders the same
way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import yaml
from yaml.resolver import Resolver

from frontrange.config.logging import get_logger
from frontrange.constants import YAML_VERSION
from frontrange.core.anchors import anchor_definitions
from frontrange.core.nodes import (
    AliasNode,
    CollectionStyle,
    MappingNode,
    ScalarNode,
    ScalarStyle,
    SequenceNode,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from frontrange.config.logging import FrontRangeLogger
    from frontrange.config.model import RenderProfile
    from frontrange.core.mapping import OrderedMapping
    from frontrange.core.nodes import Node

logger: FrontRangeLogger = get_logger(__name__)

SCALAR_STYLE_TO_EVENT: Final[dict[ScalarStyle, str | None]] = {
    ScalarStyle.ANY: None,
    ScalarStyle.PLAIN: None,
    ScalarStyle.SINGLE_QUOTED: "'",
    ScalarStyle.DOUBLE_QUOTED: '"',
    ScalarStyle.LITERAL: "|",
    ScalarStyle.FOLDED: ">",
}

FLOW_STYLE_TO_EVENT: Final[dict[CollectionStyle, bool | None]] = {
    CollectionStyle.ANY: None,
    CollectionStyle.BLOCK: False,
    CollectionStyle.FLOW: True,
}

_RESOLVER: Final[Resolver] = Resolver()
DEFAULT_SEQUENCE_TAG: Final[str] = _RESOLVER.resolve(yaml.SequenceNode, None, (True, False))
DEFAULT_MAPPING_TAG: Final[str] = _RESOLVER.resolve(yaml.MappingNode, None, (True, False))


def scalar_tag(node: ScalarNode) -> str:
    """Return the node's tag, resolving it from text and style when unset.

    Untagged plain (or automatic) scalars resolve like YAML would read them
    (``42`` is an int); untagged quoted and block scalars are strings.
    """
    if node.tag is not None:
        return node.tag
    plain = node.style in (ScalarStyle.ANY, ScalarStyle.PLAIN)
    return _RESOLVER.resolve(yaml.ScalarNode, node.text, (plain, True))


class EventBuilder:
    """Produce PyYAML events for a node tree under one render profile.

    Anchors are written where a definition is first *emitted*. When reordering
    puts an alias ahead of its anchor, the anchored node is written at the
    alias and its original position becomes an alias, so the output always
    parses back to the same values.
    """

    def __init__(self, profile: RenderProfile) -> None:
        self.profile: RenderProfile = profile
        self._defs: dict[str, Node] = {}
        self._emitted: set[str] = set()

    def _scalar_style(self, node: ScalarNode) -> str | None:
        style = self.profile.scalar_style
        if style is ScalarStyle.ANY:
            style = node.style
        return SCALAR_STYLE_TO_EVENT[style]

    @staticmethod
    def _flow_style(override: CollectionStyle, own: CollectionStyle) -> bool | None:
        return FLOW_STYLE_TO_EVENT[own if override is CollectionStyle.ANY else override]

    def node_events(self, node: Node) -> Iterator[yaml.Event]:
        """Yield the events for `node` and its children, depth first.

        Raises:
            ValueError: If an alias names an anchor defined nowhere in the tree.
        """
        if isinstance(node, AliasNode):
            anchor = node.anchor
            if anchor in self._emitted:
                yield yaml.AliasEvent(anchor)
            elif anchor in self._defs:
                logger.trace("alias %r precedes its anchor; emitting the definition", anchor)
                yield from self._value_events(self._defs[anchor], anchor)
            else:
                raise ValueError(f"alias {anchor!r} has no matching anchor")
            return
        owner = node.anchor is not None and self._defs.get(node.anchor) is node
        if owner and node.anchor in self._emitted:
            yield yaml.AliasEvent(node.anchor)
        else:
            # Other nodes reusing a taken anchor name are written without it
            yield from self._value_events(node, node.anchor if owner else None)

    def _value_events(self, node: Node, anchor: str | None) -> Iterator[yaml.Event]:
        if anchor is not None:
            self._emitted.add(anchor)
        match node:
            case ScalarNode():
                tag = scalar_tag(node)
                implicit = (
                    tag == _RESOLVER.resolve(yaml.ScalarNode, node.text, (True, False)),
                    tag == _RESOLVER.resolve(yaml.ScalarNode, node.text, (False, True)),
                )
                yield yaml.ScalarEvent(
                    anchor, tag, implicit, node.text, style=self._scalar_style(node)
                )
            case SequenceNode():
                tag = node.tag or DEFAULT_SEQUENCE_TAG
                yield yaml.SequenceStartEvent(
                    anchor,
                    tag,
                    tag == DEFAULT_SEQUENCE_TAG,
                    flow_style=self._flow_style(self.profile.sequence_style, node.style),
                )
                for item in node.items:
                    yield from self.node_events(item)
                yield yaml.SequenceEndEvent()
            case MappingNode():
                tag = node.tag or DEFAULT_MAPPING_TAG
                yield yaml.MappingStartEvent(
                    anchor,
                    tag,
                    tag == DEFAULT_MAPPING_TAG,
                    flow_style=self._flow_style(self.profile.mapping_style, node.style),
                )
                for key, value in node.mapping.pairs:
                    yield from self.node_events(key)
                    yield from self.node_events(value)
                yield yaml.MappingEndEvent()
            case AliasNode():
                pass

    def document_events(self, root: Node) -> Iterator[yaml.Event]:
        """Yield a complete single-document stream for `root`."""
        self._defs = anchor_definitions(root)
        self._emitted = set()
        explicit = self.profile.explicit_start or self.profile.canonical
        yield yaml.StreamStartEvent()
        yield yaml.DocumentStartEvent(explicit=explicit, version=YAML_VERSION if explicit else None)
        yield from self.node_events(root)
        yield yaml.DocumentEndEvent(explicit=self.profile.explicit_end)
        yield yaml.StreamEndEvent()


def emit_node(root: Node, profile: RenderProfile) -> str:
    """Render `root` as a YAML document according to `profile`.

    A `width` of ``-1`` (or any non-positive value) disables line wrapping.

    Raises:
        ValueError: If an alias in `root` has no matching anchor.
    """
    width: float = profile.width if profile.width > 0 else float("inf")
    text = yaml.emit(
        EventBuilder(profile).document_events(root),
        Dumper=yaml.SafeDumper,
        canonical=profile.canonical,
        indent=profile.indent,
        width=width,  # type: ignore[arg-type]
        allow_unicode=profile.allow_unicode,
        line_break=profile.line_break.chars,
    )
    logger.trace("emitted %d characters of YAML", len(text))
    return text


def emit_mapping(mapping: OrderedMapping, profile: RenderProfile) -> str:
    """Render a preamble mapping (the document root) according to `profile`."""
    return emit_node(MappingNode(mapping), profile)
