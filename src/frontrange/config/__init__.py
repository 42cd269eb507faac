# topmark:header:start
#
#   project      : FrontRange
#   file         : __init__.py
#   file_relpath : src/frontrange/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Formatting configuration and logging for FrontRange.

The rendering of front matter is controlled by a
[`RenderProfile`][frontrange.config.model.RenderProfile], assembled from layered
[`PartialConfig`][frontrange.config.model.PartialConfig] sources:

1. built-in defaults
2. the user (global) config file
3. the nearest project ``.fr/config.toml``
4. per-invocation overrides (CLI flags or API arguments)
"""
