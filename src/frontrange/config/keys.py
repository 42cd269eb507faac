# topmark:header:start
#
#   project      : FrontRange
#   file         : keys.py
#   file_relpath : src/frontrange/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""TOML key names for FrontRange configuration files.

Keys may appear at the top level of ``config.toml`` or inside a ``[format]``
table. Renaming a key is a breaking change for existing config files.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section and key names, in the order they are documented."""

    SECTION_FORMAT: Final[str] = "format"

    KEY_CANONICAL: Final[str] = "canonical"
    KEY_INDENT: Final[str] = "indent"
    KEY_WIDTH: Final[str] = "width"
    KEY_ALLOW_UNICODE: Final[str] = "allow_unicode"
    KEY_LINE_BREAK: Final[str] = "line_break"
    KEY_EXPLICIT_START: Final[str] = "explicit_start"
    KEY_EXPLICIT_END: Final[str] = "explicit_end"
    KEY_SORT_KEYS: Final[str] = "sort_keys"
    KEY_SEQUENCE_STYLE: Final[str] = "sequence_style"
    KEY_MAPPING_STYLE: Final[str] = "mapping_style"
    KEY_SCALAR_STYLE: Final[str] = "scalar_style"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        (
            KEY_CANONICAL,
            KEY_INDENT,
            KEY_WIDTH,
            KEY_ALLOW_UNICODE,
            KEY_LINE_BREAK,
            KEY_EXPLICIT_START,
            KEY_EXPLICIT_END,
            KEY_SORT_KEYS,
            KEY_SEQUENCE_STYLE,
            KEY_MAPPING_STYLE,
            KEY_SCALAR_STYLE,
        )
    )
