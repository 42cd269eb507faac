# topmark:header:start
#
#   project      : FrontRange
#   file         : io.py
#   file_relpath : src/frontrange/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""File reading and writing for CLI commands.

Files are read and written as UTF-8 with newline translation disabled, so
``\\r\\n`` and lone ``\\r`` line breaks in a body survive an edit byte for byte.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from frontrange.config.logging import get_logger
from frontrange.document.parser import parse_with_layout

if TYPE_CHECKING:
    from frontrange.config.logging import FrontRangeLogger
    from frontrange.document.model import Document
    from frontrange.document.parser import DocumentLayout

logger: FrontRangeLogger = get_logger(__name__)


def read_text(path: Path) -> str:
    """Read `path` as UTF-8 without newline translation."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: Path, text: str) -> int:
    """Write `text` to `path` as UTF-8 without newline translation.

    Returns:
        int: Number of bytes written.
    """
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    size = len(text.encode("utf-8"))
    logger.debug("wrote %d bytes to %s", size, path)
    return size


def load_document(path: Path) -> tuple[str, Document, DocumentLayout]:
    """Read and parse `path`, returning the raw text, the document and its layout.

    Raises:
        OSError: If the file cannot be read.
        DocumentParseError: If the text has no valid front matter.
    """
    text = read_text(path)
    document, layout = parse_with_layout(text)
    logger.debug("parsed %s: %d keys", path, len(document))
    return text, document, layout
