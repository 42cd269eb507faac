# topmark:header:start
#
#   project      : FrontRange
#   file         : anchors.py
#   file_relpath : src/frontrange/core/anchors.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Anchor and alias bookkeeping for node trees.

An [`AliasNode`][frontrange.core.nodes.AliasNode] only means something next to the
node that defines its anchor. Edits that drop or extract part of a preamble
can separate the two; the helpers here find definitions and put them back
where the first orphaned alias stands.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from frontrange.core.mapping import OrderedMapping
from frontrange.core.nodes import AliasNode, MappingNode, SequenceNode

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from frontrange.core.nodes import Node


def walk(node: Node) -> Iterator[Node]:
    """Yield `node` and its descendants in document order (keys before values)."""
    yield node
    match node:
        case SequenceNode():
            for item in node.items:
                yield from walk(item)
        case MappingNode():
            for key, value in node.mapping.pairs:
                yield from walk(key)
                yield from walk(value)
        case _:
            pass


def anchor_definitions(root: Node) -> dict[str, Node]:
    """Map each anchor name to the first node in `root` that defines it."""
    defs: dict[str, Node] = {}
    for node in walk(root):
        if not isinstance(node, AliasNode) and node.anchor is not None:
            defs.setdefault(node.anchor, node)
    return defs


def alias_names(root: Node) -> set[str]:
    """Names referenced by aliases anywhere in `root`."""
    return {node.anchor for node in walk(root) if isinstance(node, AliasNode)}


def orphaned_aliases(root: Node) -> set[str]:
    """Alias names in `root` whose anchor is not defined inside `root`."""
    return alias_names(root) - set(anchor_definitions(root))


def inline_missing_anchors(root: Node, definitions: Mapping[str, Node]) -> Node:
    """Replace the first orphaned alias of each name with its definition.

    The inlined node keeps its anchor, so later aliases of the same name stay
    aliases and resolve to it. Aliases whose name is absent from
    `definitions` are left alone. Returns `root` itself when nothing changes.
    """
    missing = orphaned_aliases(root) & set(definitions)
    if not missing:
        return root
    inlined: set[str] = set()

    def rebuild(node: Node) -> Node:
        match node:
            case AliasNode(anchor=anchor) if anchor in missing and anchor not in inlined:
                inlined.add(anchor)
                return rebuild(definitions[anchor])
            case SequenceNode():
                items = tuple(rebuild(item) for item in node.items)
                if all(new is old for new, old in zip(items, node.items)):
                    return node
                return node.with_items(items)
            case MappingNode():
                pairs = [(rebuild(k), rebuild(v)) for k, v in node.mapping.pairs]
                if all(
                    nk is k and nv is v for (nk, nv), (k, v) in zip(pairs, node.mapping.pairs)
                ):
                    return node
                return node.with_mapping(OrderedMapping(pairs))
            case _:
                return node

    return rebuild(root)


def drop_unreferenced_anchor(node: Node) -> Node:
    """Return `node` without its own anchor when no alias inside it refers to that anchor."""
    if isinstance(node, AliasNode) or node.anchor is None:
        return node
    if node.anchor in alias_names(node):
        return node
    return replace(node, anchor=None)
