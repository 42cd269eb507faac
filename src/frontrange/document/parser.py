# topmark:header:start
#
#   project      : FrontRange
#   file         : parser.py
#   file_relpath : src/frontrange/document/parser.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Split document text into front matter and body, and parse the front matter.

Delimiter convention:
    - The text must start with a ``---`` line (``\\n`` or ``\\r\\n`` terminated).
    - The front matter runs up to the next line that is exactly ``---``; line
      breaks may be ``\\n``, ``\\r\\n`` or ``\\r``. A final ``---`` without a line
      break closes the block and leaves an empty body.
    - Everything after the closing line (and its line break) is the body,
      returned verbatim.
    - When the front matter begins with YAML directives (``%YAML 1.1``), the
      ``---`` line after them is the YAML directives-end marker and is part of
      the front matter, not the closing delimiter. Comments and blank lines may
      appear between the directives and the marker.

The front matter must be a single YAML document whose root is a mapping. An
empty or comment-only front matter is an empty mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import yaml

from frontrange.config.logging import get_logger
from frontrange.constants import PREAMBLE_DELIMITER
from frontrange.core.errors import (
    MissingClosingDelimiter,
    MissingOpeningDelimiter,
    PreambleGrammarError,
    PreambleNotAMapping,
)
from frontrange.core.lines import LINE_RE, LineIndex, LineRange, strip_line_break
from frontrange.core.mapping import OrderedMapping, key_text
from frontrange.core.nodes import MappingNode, ScalarNode, node_kind
from frontrange.document.composer import KeySpan, compose_preamble
from frontrange.document.model import Document

if TYPE_CHECKING:
    from frontrange.config.logging import FrontRangeLogger

logger: FrontRangeLogger = get_logger(__name__)

NULL_TAG = "tag:yaml.org,2002:null"


class SplitText(NamedTuple):
    """Raw pieces of a front-mattered text.

    Attributes:
        preamble (str): YAML text between the delimiter lines.
        body (str): Everything after the closing delimiter line.
        preamble_offset (int): Offset of the first preamble character in the text.
        closing_offset (int): Offset of the closing delimiter line.
        body_offset (int): Offset of the first body character.
    """

    preamble: str
    body: str
    preamble_offset: int
    closing_offset: int
    body_offset: int


@dataclass(frozen=True)
class DocumentLayout:
    """Where things are in the original text (1-based, inclusive line ranges).

    Attributes:
        front_matter (LineRange): From the opening to the closing delimiter line.
        preamble (LineRange | None): The YAML lines between the delimiters, or
            None when there are none.
        body_start (int): Line number of the first body line. Greater than
            `line_count` when the body is empty.
        line_count (int): Total number of lines in the text.
        keys (tuple[tuple[str, LineRange], ...]): Lines of each top-level scalar key,
            from the key to the end of its value.
    """

    front_matter: LineRange
    preamble: LineRange | None
    body_start: int
    line_count: int
    keys: tuple[tuple[str, LineRange], ...] = ()

    def key_lines(self, key: str) -> LineRange | None:
        """Return the line range of top-level `key`, or None when absent."""
        for name, rng in self.keys:
            if name == key:
                return rng
        return None


def _is_directives_end(content: str) -> bool:
    if content == PREAMBLE_DELIMITER:
        return True
    return content.startswith((f"{PREAMBLE_DELIMITER} ", f"{PREAMBLE_DELIMITER}\t"))


def split_front_matter(text: str) -> SplitText:
    """Locate the delimiter lines in `text`.

    Raises:
        MissingOpeningDelimiter: If `text` does not start with a ``---`` line.
        MissingClosingDelimiter: If no closing ``---`` line follows.
    """
    for opening in (f"{PREAMBLE_DELIMITER}\n", f"{PREAMBLE_DELIMITER}\r\n"):
        if text.startswith(opening):
            start = len(opening)
            break
    else:
        raise MissingOpeningDelimiter()

    # "start" → nothing significant yet; "directives" → saw %-lines; "content" → YAML proper
    phase = "start"
    for match in LINE_RE.finditer(text, start):
        line = match.group(0)
        if not line:
            break
        content = strip_line_break(line)
        if phase != "content":
            stripped = content.strip()
            if content.startswith("%"):
                phase = "directives"
                continue
            if not stripped or stripped.startswith("#"):
                continue
            if phase == "directives" and _is_directives_end(content):
                phase = "content"
                continue
            phase = "content"
        if content == PREAMBLE_DELIMITER:
            return SplitText(
                preamble=text[start : match.start()],
                body=text[match.end() :],
                preamble_offset=start,
                closing_offset=match.start(),
                body_offset=match.end(),
            )
    raise MissingClosingDelimiter()


def _preamble_mapping(preamble_text: str) -> tuple[OrderedMapping, tuple[KeySpan, ...]]:
    try:
        composed = compose_preamble(preamble_text)
    except yaml.YAMLError as exc:
        logger.debug("YAML error in front matter: %s", exc)
        raise PreambleGrammarError(exc) from exc

    root = composed.root
    if root is None:
        return OrderedMapping(), ()
    if isinstance(root, ScalarNode) and root.text == "" and root.tag == NULL_TAG:
        # A bare directives-end marker with no content
        return OrderedMapping(), ()
    if not isinstance(root, MappingNode):
        raise PreambleNotAMapping(node_kind(root))
    return root.mapping, composed.key_spans


def parse_with_layout(text: str) -> tuple[Document, DocumentLayout]:
    """Parse `text` and also report where the front matter, body and keys are.

    Raises:
        MissingOpeningDelimiter: If the text does not start with a delimiter line.
        MissingClosingDelimiter: If the front matter is never closed.
        PreambleGrammarError: If the YAML library rejects the front matter.
        PreambleNotAMapping: If the front matter root is not a mapping.
    """
    parts = split_front_matter(text)
    mapping, spans = _preamble_mapping(parts.preamble)

    index = LineIndex(text)
    closing_line = index.line_number(parts.closing_offset)
    preamble_lines: LineRange | None = None
    if parts.closing_offset > parts.preamble_offset:
        preamble_lines = index.line_range(parts.preamble_offset, parts.closing_offset)

    keys: list[tuple[str, LineRange]] = []
    offset = parts.preamble_offset
    for span in spans:
        name = key_text(span.key)
        if name is not None:
            keys.append((name, index.line_range(offset + span.start, offset + span.end)))

    layout = DocumentLayout(
        front_matter=LineRange(1, closing_line),
        preamble=preamble_lines,
        body_start=closing_line + 1,
        line_count=index.line_count,
        keys=tuple(keys),
    )
    logger.trace("parsed front matter: %d keys, body at line %d", len(mapping), layout.body_start)
    return Document(mapping, parts.body), layout


def parse_document(text: str) -> Document:
    """Parse `text` into a [`Document`][frontrange.document.model.Document].

    Raises:
        DocumentParseError: One of its four subclasses, see
            [`parse_with_layout`][frontrange.document.parser.parse_with_layout].
    """
    return parse_with_layout(text)[0]
