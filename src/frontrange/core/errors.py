# topmark:header:start
#
#   project      : FrontRange
#   file         : errors.py
#   file_relpath : src/frontrange/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Exception hierarchy for FrontRange.

All library failures derive from [`FrontRangeError`][frontrange.core.errors.FrontRangeError].
The tree is split by phase so callers can catch exactly what they want to
handle:

- [`DocumentParseError`][frontrange.core.errors.DocumentParseError]: the text could not
  be split into preamble and body, or the preamble is not a YAML mapping.
- [`MutationError`][frontrange.core.errors.MutationError]: a precondition of an edit
  was not met (missing key, existing key, not a sequence).
- [`ConfigError`][frontrange.core.errors.ConfigError]: a configuration file was found
  but could not be used.

Every error carries the offending key or path as an attribute so batch callers
can report per item without parsing messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class FrontRangeError(Exception):
    """Base class for all FrontRange errors."""


# --- Parsing -----------------------------------------------------------------


class DocumentParseError(FrontRangeError):
    """The document text could not be parsed."""


class MissingOpeningDelimiter(DocumentParseError):
    """The text does not start with a `---` line."""

    def __init__(self) -> None:
        super().__init__("document does not start with a '---' front matter delimiter")


class MissingClosingDelimiter(DocumentParseError):
    """No closing `---` line follows the opening delimiter."""

    def __init__(self) -> None:
        super().__init__("front matter is not terminated by a closing '---' line")


class PreambleNotAMapping(DocumentParseError):
    """The preamble parsed, but its root is a sequence, scalar or alias."""

    def __init__(self, kind: str) -> None:
        self.kind: str = kind
        super().__init__(f"front matter root must be a mapping, found a {kind}")


class PreambleGrammarError(DocumentParseError):
    """The YAML library rejected the preamble text.

    Attributes:
        underlying (Exception): The original exception raised by the YAML library.
    """

    def __init__(self, underlying: Exception) -> None:
        self.underlying: Exception = underlying
        super().__init__(f"invalid YAML in front matter: {underlying}")


# --- Mutations ---------------------------------------------------------------


class MutationError(FrontRangeError):
    """Base class for failed edit preconditions."""

    def __init__(self, key: str, message: str) -> None:
        self.key: str = key
        super().__init__(message)


class KeyNotFound(MutationError):
    """The targeted key is not present in the preamble."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"key not found: {key!r}")


class NotAnArray(MutationError):
    """The targeted key exists but its value is not a sequence."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"value of {key!r} is not an array")


class OldKeyNotFound(MutationError):
    """Rename source key is missing."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"cannot rename: key not found: {key!r}")


class NewKeyAlreadyExists(MutationError):
    """Rename target key is already present."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"cannot rename: key already exists: {key!r}")


class IndexOutOfRange(FrontRangeError, IndexError):
    """Positional access outside ``0 <= index < length``."""

    def __init__(self, index: int, length: int) -> None:
        self.index: int = index
        self.length: int = length
        super().__init__(f"index {index} out of range for mapping of length {length}")


# --- Configuration -----------------------------------------------------------


class ConfigError(FrontRangeError):
    """Base class for configuration failures."""


class ConfigFileError(ConfigError):
    """A configuration file exists but is malformed or unreadable.

    Attributes:
        path (Path): The offending file.
        reason (str): Short description of what is wrong with it.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path: Path = path
        self.reason: str = reason
        super().__init__(f"{path}: {reason}")
