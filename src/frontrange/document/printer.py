# topmark:header:start
#
#   project      : FrontRange
#   file         : printer.py
#   file_relpath : src/frontrange/document/printer.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Print a Document back to text.

Output layout::

    ---\\n
    <front matter YAML emitted under the render profile>
    ---\\n
    <body, verbatim>

The caller's document is never modified; key sorting works on a copy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from frontrange.config.logging import get_logger
from frontrange.config.model import DEFAULT_PROFILE
from frontrange.constants import PREAMBLE_DELIMITER
from frontrange.core.mapping import OrderedMapping, default_sort_key
from frontrange.core.nodes import MappingNode, SequenceNode
from frontrange.document.emitter import emit_mapping

if TYPE_CHECKING:
    from frontrange.config.logging import FrontRangeLogger
    from frontrange.config.model import RenderProfile
    from frontrange.core.nodes import Node
    from frontrange.document.model import Document

logger: FrontRangeLogger = get_logger(__name__)


def _sort_node(node: Node) -> Node:
    if isinstance(node, MappingNode):
        return node.with_mapping(sort_mapping_deep(node.mapping))
    if isinstance(node, SequenceNode):
        return node.with_items(tuple(_sort_node(item) for item in node.items))
    return node


def sort_mapping_deep(mapping: OrderedMapping) -> OrderedMapping:
    """Sort `mapping` and every nested mapping by key text (stable)."""
    pairs = ((k, _sort_node(v)) for k, v in mapping.pairs)
    return OrderedMapping(pairs).sorted(default_sort_key)


def render_preamble(mapping: OrderedMapping, profile: RenderProfile | None = None) -> str:
    """Emit only the front matter YAML (no delimiter lines)."""
    prof = profile or DEFAULT_PROFILE
    if prof.sort_keys:
        mapping = sort_mapping_deep(mapping)
    return emit_mapping(mapping, prof)


def print_document(document: Document, profile: RenderProfile | None = None) -> str:
    """Render `document` as text.

    Re-parsing the result yields a preamble equal to the document's (same keys,
    values and order, unless `profile.sort_keys` is set) and an identical body.
    """
    yaml_text = render_preamble(document.preamble, profile)
    logger.trace("printing document with %d keys", len(document.preamble))
    delimiter = f"{PREAMBLE_DELIMITER}\n"
    return f"{delimiter}{yaml_text}{delimiter}{document.body}"
