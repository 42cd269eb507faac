# topmark:header:start
#
#   project      : FrontRange
#   file         : __init__.py
#   file_relpath : src/frontrange/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Front matter documents: parsing, printing, conversion and edits.

The YAML grammar itself is delegated to PyYAML's event layer through
[`composer`][frontrange.document.composer] and [`emitter`][frontrange.document.emitter].
"""
