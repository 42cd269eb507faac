# topmark:header:start
#
#   project      : FrontRange
#   file         : __init__.py
#   file_relpath : src/frontrange/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange package.

FrontRange reads text documents that start with a YAML front matter block,
lets callers query and edit individual keys, and writes the document back with
the body untouched. It exposes a small typed API and the ``fr`` CLI.
"""

from __future__ import annotations

from frontrange.config.model import PartialConfig, RenderProfile
from frontrange.config.resolver import resolve
from frontrange.core.errors import (
    ConfigError,
    ConfigFileError,
    DocumentParseError,
    FrontRangeError,
    IndexOutOfRange,
    KeyNotFound,
    MissingClosingDelimiter,
    MissingOpeningDelimiter,
    MutationError,
    NewKeyAlreadyExists,
    NotAnArray,
    OldKeyNotFound,
    PreambleGrammarError,
    PreambleNotAMapping,
)
from frontrange.core.mapping import OrderedMapping
from frontrange.core.nodes import (
    AliasNode,
    CollectionStyle,
    MappingNode,
    Node,
    ScalarNode,
    ScalarStyle,
    SequenceNode,
)
from frontrange.document.model import ArrayEdit, ArrayEditOutcome, Document
from frontrange.document.parser import DocumentLayout, parse_document, parse_with_layout
from frontrange.document.printer import print_document

__all__: list[str] = [
    "AliasNode",
    "ArrayEdit",
    "ArrayEditOutcome",
    "CollectionStyle",
    "ConfigError",
    "ConfigFileError",
    "Document",
    "DocumentLayout",
    "DocumentParseError",
    "FrontRangeError",
    "IndexOutOfRange",
    "KeyNotFound",
    "MappingNode",
    "MissingClosingDelimiter",
    "MissingOpeningDelimiter",
    "MutationError",
    "NewKeyAlreadyExists",
    "Node",
    "NotAnArray",
    "OldKeyNotFound",
    "OrderedMapping",
    "PartialConfig",
    "PreambleGrammarError",
    "PreambleNotAMapping",
    "RenderProfile",
    "ScalarNode",
    "ScalarStyle",
    "SequenceNode",
    "parse_document",
    "parse_with_layout",
    "print_document",
    "resolve",
]
