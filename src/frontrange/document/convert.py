# topmark:header:start
#
#   project      : FrontRange
#   file         : convert.py
#   file_relpath : src/frontrange/document/convert.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Convert between FrontRange nodes and plain Python values.

Both directions go through PyYAML's safe representer and constructor, so the
mapping between YAML tags and Python types is exactly the one `yaml.safe_load`
and `yaml.safe_dump` use (``42`` → int, ``2024-01-02`` → date, ``~`` → None).
"""

from __future__ import annotations

import datetime
import io
import json
import plistlib
from xml.parsers.expat import ExpatError
from typing import TYPE_CHECKING, Any

import yaml

from frontrange.core.mapping import OrderedMapping
from frontrange.core.nodes import (
    AliasNode,
    MappingNode,
    ScalarNode,
    ScalarStyle,
    SequenceNode,
)
from frontrange.document.composer import SCALAR_STYLE_FROM_EVENT, compose_preamble
from frontrange.document.emitter import DEFAULT_MAPPING_TAG, DEFAULT_SEQUENCE_TAG, scalar_tag

if TYPE_CHECKING:
    from frontrange.core.nodes import Node


# --- Python → Node ---


def _from_yaml_node(ynode: yaml.Node) -> Node:
    if isinstance(ynode, yaml.ScalarNode):
        style = SCALAR_STYLE_FROM_EVENT.get(ynode.style, ScalarStyle.PLAIN)
        return ScalarNode(ynode.value, style=style, tag=ynode.tag)
    if isinstance(ynode, yaml.SequenceNode):
        return SequenceNode(tuple(_from_yaml_node(item) for item in ynode.value))
    return MappingNode(
        OrderedMapping((_from_yaml_node(k), _from_yaml_node(v)) for k, v in ynode.value)
    )


def node_from_python(value: Any) -> Node:
    """Represent a Python value as a node tree.

    Nodes pass through unchanged. Other values are represented the way
    `yaml.safe_dump` would (dict order is kept); collections get automatic style.

    Raises:
        yaml.representer.RepresenterError: For types the safe representer rejects.
    """
    if isinstance(value, (ScalarNode, SequenceNode, MappingNode, AliasNode)):
        return value
    if isinstance(value, OrderedMapping):
        return MappingNode(value)
    dumper = yaml.SafeDumper(io.StringIO(), sort_keys=False)
    return _from_yaml_node(dumper.represent_data(value))


def mapping_from_python(value: Any) -> OrderedMapping:
    """Like [`node_from_python`][frontrange.document.convert.node_from_python] but requires a dict.

    Raises:
        TypeError: If `value` does not represent a mapping.
    """
    node = node_from_python(value)
    if not isinstance(node, MappingNode):
        raise TypeError(f"expected a mapping, got {type(value).__name__}")
    return node.mapping


# --- Node → Python ---


class _YamlNodeBuilder:
    """Build `yaml.Node` trees, resolving aliases by anchor name in any order.

    Anchors are looked up in `context`, which is usually the whole preamble,
    so a value that is only an alias can still be built on its own.
    """

    def __init__(self, context: Node) -> None:
        self._defs: dict[str, Node] = {}
        self._built: dict[str, yaml.Node] = {}
        self._collect(context)

    def _collect(self, node: Node) -> None:
        match node:
            case AliasNode():
                return
            case ScalarNode():
                pass
            case SequenceNode():
                for item in node.items:
                    self._collect(item)
            case MappingNode():
                for k, v in node.mapping.pairs:
                    self._collect(k)
                    self._collect(v)
        if node.anchor is not None:
            self._defs.setdefault(node.anchor, node)

    def build(self, node: Node) -> yaml.Node:
        match node:
            case AliasNode(anchor=anchor):
                if anchor not in self._defs:
                    raise ValueError(f"undefined alias {anchor!r}")
                return self._anchored(anchor)
            case _ if node.anchor is not None and self._defs.get(node.anchor) is node:
                return self._anchored(node.anchor)
            case _:
                return self._build_plain(node)

    def _anchored(self, anchor: str) -> yaml.Node:
        built = self._built.get(anchor)
        if built is None:
            built = self._build_plain(self._defs[anchor], anchor=anchor)
        return built

    def _build_plain(self, node: Node, anchor: str | None = None) -> yaml.Node:
        # Collections are registered before their children so self-references resolve
        ynode: yaml.Node
        match node:
            case ScalarNode():
                ynode = yaml.ScalarNode(scalar_tag(node), node.text)
                if anchor is not None:
                    self._built[anchor] = ynode
            case SequenceNode():
                ynode = yaml.SequenceNode(node.tag or DEFAULT_SEQUENCE_TAG, [])
                if anchor is not None:
                    self._built[anchor] = ynode
                ynode.value.extend(self.build(i) for i in node.items)
            case MappingNode():
                ynode = yaml.MappingNode(node.tag or DEFAULT_MAPPING_TAG, [])
                if anchor is not None:
                    self._built[anchor] = ynode
                ynode.value.extend((self.build(k), self.build(v)) for k, v in node.mapping.pairs)
            case AliasNode():
                ynode = self.build(node)
        return ynode


def node_to_python(node: Node, context: Node | None = None) -> Any:
    """Construct the Python value a YAML safe loader would produce for `node`.

    Aliases are resolved to the same Python object as their anchor. Anchors
    are looked up in `context` (the document's root mapping when `node` is one
    of its values) and in `node` itself.

    Raises:
        ValueError: If an alias names an anchor defined in neither `node` nor `context`.
        yaml.constructor.ConstructorError: If a value cannot be constructed
            (for example an unhashable mapping key).
    """
    builder = _YamlNodeBuilder(node if context is None else SequenceNode((context, node)))
    return yaml.SafeLoader("").construct_document(builder.build(node))


def mapping_to_python(mapping: OrderedMapping) -> dict[Any, Any]:
    """Convert a preamble mapping to a plain dict, keeping key order."""
    return node_to_python(MappingNode(mapping))


def to_json(value: Any, *, indent: int | None = 2) -> str:
    """Serialize a constructed value as JSON; dates and other non-JSON scalars become strings."""
    return json.dumps(value, indent=indent, ensure_ascii=False, default=str)


def _plist_value(value: Any) -> Any:
    match value:
        case dict():
            return {str(k): _plist_value(v) for k, v in value.items() if v is not None}
        case list() | tuple() | set() | frozenset():
            return [_plist_value(v) for v in value if v is not None]
        case bool() | float() | str() | bytes() | datetime.datetime():
            return value
        case int():
            return value if -(2**63) <= value < 2**64 else str(value)
        case datetime.date():
            return datetime.datetime.combine(value, datetime.time())
        case _:
            return str(value)


def to_plist(value: Any) -> str:
    """Serialize a constructed value as an XML property list.

    Property lists have no null, so None values are left out; dates become
    midnight datetimes and other unsupported scalars become strings.
    """
    return plistlib.dumps(_plist_value(value), fmt=plistlib.FMT_XML, sort_keys=False).decode(
        "utf-8"
    )


# --- Text → Node ---


def parse_data(text: str, data_format: str) -> Node:
    """Parse replacement data given as JSON, YAML or XML property list text.

    YAML input keeps its styles; JSON and plist input are represented like
    Python values.

    Raises:
        ValueError: If the text cannot be parsed (the original error is chained).
    """
    if data_format == "json":
        try:
            return node_from_python(json.loads(text))
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid JSON: {exc}") from exc
    if data_format == "plist":
        try:
            return node_from_python(plistlib.loads(text.encode("utf-8")))
        except (plistlib.InvalidFileException, ExpatError) as exc:
            raise ValueError(f"invalid property list: {exc}") from exc
    try:
        root = compose_preamble(text).root
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML: {exc}") from exc
    return root if root is not None else MappingNode(OrderedMapping())
