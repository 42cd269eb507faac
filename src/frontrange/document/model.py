# topmark:header:start
#
#   project      : FrontRange
#   file         : model.py
#   file_relpath : src/frontrange/document/model.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Front-mattered document model and its edit operations.

A [`Document`][frontrange.document.model.Document] pairs the parsed front matter
(an [`OrderedMapping`][frontrange.core.mapping.OrderedMapping]) with the body text.
Documents are immutable: every edit returns a new document and leaves the
receiver untouched, so a document can be shared freely between threads.

Edit preconditions raise the dedicated
[`MutationError`][frontrange.core.errors.MutationError] subclasses so batch callers
can decide per file whether to skip, report or abort. Array operations that
can legitimately do nothing return an
[`ArrayEdit`][frontrange.document.model.ArrayEdit] whose outcome tells which case
happened.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from frontrange.config.logging import get_logger
from frontrange.core.errors import KeyNotFound, NewKeyAlreadyExists, NotAnArray, OldKeyNotFound
from frontrange.core.anchors import (
    anchor_definitions,
    drop_unreferenced_anchor,
    inline_missing_anchors,
    orphaned_aliases,
)
from frontrange.core.mapping import OrderedMapping, default_sort_key, length_sort_key
from frontrange.core.nodes import (
    MappingNode,
    ScalarNode,
    SequenceNode,
    enum_from_token,
    scalar_matches,
)
from frontrange.document.convert import (
    mapping_from_python,
    mapping_to_python,
    node_from_python,
    node_to_python,
)

if TYPE_CHECKING:
    from frontrange.config.logging import FrontRangeLogger
    from frontrange.config.model import RenderProfile
    from frontrange.core.mapping import Pair
    from frontrange.core.nodes import Node

logger: FrontRangeLogger = get_logger(__name__)


class SortMethod(str, Enum):
    """Built-in key orders for `Document.sort_keys`."""

    ALPHABETICAL = "alphabetical"
    LENGTH = "length"

    @classmethod
    def from_name(cls, key_name: str | None) -> SortMethod | None:
        """Return the member for a case-insensitive token, or None if unmatched."""
        return enum_from_token(cls, key_name)


class ArrayEditOutcome(str, Enum):
    """What an array edit did."""

    APPLIED = "applied"
    SKIPPED_DUPLICATE = "skipped_duplicate"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ArrayEdit:
    """Result of an array edit: the (possibly unchanged) document and the outcome."""

    document: Document
    outcome: ArrayEditOutcome

    @property
    def changed(self) -> bool:
        """True when the document was modified."""
        return self.outcome is ArrayEditOutcome.APPLIED


def _as_value_node(value: Any) -> Node:
    # Strings become untagged scalars so they render like hand-written YAML
    if isinstance(value, str):
        return ScalarNode(value)
    return node_from_python(value)


@dataclass(frozen=True)
class Document:
    """A text document with YAML front matter.

    Attributes:
        preamble (OrderedMapping): The front matter, in key order.
        body (str): Everything after the closing delimiter, verbatim.
    """

    preamble: OrderedMapping = field(default_factory=OrderedMapping)
    body: str = ""

    # --- Parsing / printing -------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Document:
        """Parse `text`; see [`parse_document`][frontrange.document.parser.parse_document]."""
        from frontrange.document.parser import parse_document  # parser imports this module

        return parse_document(text)

    def render(self, profile: RenderProfile | None = None) -> str:
        """Print the document with `profile` (defaults when None)."""
        from frontrange.document.printer import print_document

        return print_document(self, profile)

    # --- Queries ------------------------------------------------------------

    def get(self, key: str | Node) -> Node | None:
        """Return the value node for `key`, or None when absent."""
        return self.preamble.get(key)

    def get_resolved(self, key: str | Node) -> Node | None:
        """Return the value node for `key` with its aliases made self-contained.

        Aliases pointing at anchors defined elsewhere in the preamble are
        replaced by those definitions, so the node can be printed on its own.
        The node keeps its own anchor only if an alias inside it refers to it.
        """
        node = self.preamble.get(key)
        if node is None:
            return None
        defs = anchor_definitions(MappingNode(self.preamble))
        return drop_unreferenced_anchor(inline_missing_anchors(node, defs))

    def get_value(self, key: str | Node, default: Any = None) -> Any:
        """Return the value for `key` as a Python object, or `default` when absent.

        Aliases resolve against anchors anywhere in the preamble.
        """
        node = self.preamble.get(key)
        if node is None:
            return default
        return node_to_python(node, MappingNode(self.preamble))

    def has(self, key: str | Node) -> bool:
        """Return True when `key` is present."""
        return key in self.preamble

    def __contains__(self, key: object) -> bool:
        return key in self.preamble

    def __len__(self) -> int:
        return len(self.preamble)

    def keys(self) -> list[str]:
        """Top-level scalar key names, in order."""
        return self.preamble.key_texts()

    def to_python(self) -> dict[Any, Any]:
        """The front matter as a plain dict."""
        return mapping_to_python(self.preamble)

    # --- Key edits ----------------------------------------------------------

    def set(self, key: str | Node, value: Any) -> Document:
        """Bind `key` to `value`, in place if the key exists, appended otherwise.

        `value` may be a [`Node`][frontrange.core.nodes.Node], a string (stored as an
        untagged scalar, so ``"42"`` renders as the YAML integer ``42``) or any
        other value the YAML safe representer accepts.
        """
        return self._with(self.preamble.with_item(key, _as_value_node(value)))

    def pop(self, key: str | Node) -> tuple[Document, Node | None]:
        """Remove `key`, returning the new document and the removed value (None if absent)."""
        mapping, removed = self.preamble.pop(key)
        if removed is None:
            return self, None
        return self._with(mapping), removed

    def remove(self, key: str | Node) -> Document:
        """Remove `key`; removing an absent key returns the document unchanged."""
        return self.pop(key)[0]

    def remove_at(self, index: int) -> tuple[Document, Pair]:
        """Remove the entry at position `index`.

        Raises:
            IndexOutOfRange: If `index` is outside ``0 <= index < len(self)``.
        """
        mapping, removed = self.preamble.remove_at(index)
        return self._with(mapping), removed

    def rename(self, old: str, new: str) -> Document:
        """Rename key `old` to `new`, keeping the entry's position and value.

        Raises:
            OldKeyNotFound: If `old` is absent.
            NewKeyAlreadyExists: If `new` is present.
        """
        if old not in self.preamble:
            raise OldKeyNotFound(old)
        if new in self.preamble:
            raise NewKeyAlreadyExists(new)
        return self._with(self.preamble.replace_key(old, new))

    def replace_preamble(self, preamble: OrderedMapping | dict[Any, Any]) -> Document:
        """Swap the whole front matter, keeping the body."""
        if not isinstance(preamble, OrderedMapping):
            preamble = mapping_from_python(preamble)
        return self._with(preamble)

    def with_body(self, body: str) -> Document:
        """Return a copy with a different body."""
        return Document(self.preamble, body)

    # --- Ordering -----------------------------------------------------------

    def sort(self, key: Callable[[Pair], Any] | None = None, *, reverse: bool = False) -> Document:
        """Stable sort of the top-level entries (alphabetical by key text by default)."""
        return self._with(self.preamble.sorted(key, reverse=reverse))

    def sort_keys(
        self, method: SortMethod = SortMethod.ALPHABETICAL, *, reverse: bool = False
    ) -> Document:
        """Sort top-level keys alphabetically, or by length then alphabetically."""
        sort_key = length_sort_key if method is SortMethod.LENGTH else default_sort_key
        return self.sort(sort_key, reverse=reverse)

    def reverse(self) -> Document:
        """Reverse the order of the top-level entries."""
        return self._with(self.preamble.reversed())

    # --- Array edits --------------------------------------------------------

    def _sequence(self, key: str) -> SequenceNode:
        node = self.preamble.get(key)
        if node is None:
            raise KeyNotFound(key)
        if not isinstance(node, SequenceNode):
            raise NotAnArray(key)
        return node

    def array_contains(self, key: str, value: str, *, case_insensitive: bool = False) -> bool:
        """Return True if the sequence at `key` holds a scalar equal to `value`.

        Raises:
            KeyNotFound: If `key` is absent.
            NotAnArray: If the value at `key` is not a sequence.
        """
        seq = self._sequence(key)
        return any(scalar_matches(i, value, case_insensitive=case_insensitive) for i in seq.items)

    def _insert(
        self,
        key: str,
        value: Any,
        *,
        at_start: bool,
        skip_duplicates: bool,
        case_insensitive: bool,
    ) -> ArrayEdit:
        seq = self._sequence(key)
        node = _as_value_node(value)
        if skip_duplicates and isinstance(node, ScalarNode):
            if any(
                scalar_matches(i, node.text, case_insensitive=case_insensitive) for i in seq.items
            ):
                logger.debug("%r already holds %r, skipping", key, node.text)
                return ArrayEdit(self, ArrayEditOutcome.SKIPPED_DUPLICATE)
        items = (node, *seq.items) if at_start else (*seq.items, node)
        return ArrayEdit(self.set(key, seq.with_items(items)), ArrayEditOutcome.APPLIED)

    def array_append(
        self,
        key: str,
        value: Any,
        *,
        skip_duplicates: bool = False,
        case_insensitive: bool = False,
    ) -> ArrayEdit:
        """Append `value` to the sequence at `key`.

        With `skip_duplicates`, a scalar value (a string, number, boolean or
        `ScalarNode`) whose text already appears as a scalar element (compared
        case-insensitively if requested) is not added again.
        Nested collections are never considered duplicates.

        Raises:
            KeyNotFound: If `key` is absent.
            NotAnArray: If the value at `key` is not a sequence.
        """
        return self._insert(
            key,
            value,
            at_start=False,
            skip_duplicates=skip_duplicates,
            case_insensitive=case_insensitive,
        )

    def array_prepend(
        self,
        key: str,
        value: Any,
        *,
        skip_duplicates: bool = False,
        case_insensitive: bool = False,
    ) -> ArrayEdit:
        """Insert `value` at the start of the sequence at `key`; see `array_append`."""
        return self._insert(
            key,
            value,
            at_start=True,
            skip_duplicates=skip_duplicates,
            case_insensitive=case_insensitive,
        )

    def array_remove_first(
        self, key: str, value: str, *, case_insensitive: bool = False
    ) -> ArrayEdit:
        """Remove the first scalar element equal to `value` from the sequence at `key`.

        The outcome is ``NOT_FOUND`` (and the document unchanged) when no
        element matches.

        Raises:
            KeyNotFound: If `key` is absent.
            NotAnArray: If the value at `key` is not a sequence.
        """
        seq = self._sequence(key)
        for pos, item in enumerate(seq.items):
            if scalar_matches(item, value, case_insensitive=case_insensitive):
                items = seq.items[:pos] + seq.items[pos + 1 :]
                return ArrayEdit(self.set(key, seq.with_items(items)), ArrayEditOutcome.APPLIED)
        return ArrayEdit(self, ArrayEditOutcome.NOT_FOUND)

    def _with(self, preamble: OrderedMapping) -> Document:
        # Dropping or replacing an anchored node must not orphan its aliases
        root = MappingNode(preamble)
        orphans = orphaned_aliases(root)
        if orphans:
            logger.debug("re-homing anchors %s after edit", sorted(orphans))
            repaired = inline_missing_anchors(root, anchor_definitions(MappingNode(self.preamble)))
            if isinstance(repaired, MappingNode):
                preamble = repaired.mapping
        return Document(preamble, self.body)
