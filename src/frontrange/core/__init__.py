# topmark:header:start
#
#   project      : FrontRange
#   file         : __init__.py
#   file_relpath : src/frontrange/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Core value types for FrontRange: nodes, ordered mappings, errors and line helpers.

Nothing in this package performs I/O or depends on the YAML library; the
`frontrange.document` package adapts these types to PyYAML.
"""
