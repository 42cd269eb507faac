# topmark:header:start
#
#   project      : FrontRange
#   file         : __main__.py
#   file_relpath : src/frontrange/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Module entry point for running FrontRange via ``python -m frontrange``.

Delegates to :func:`frontrange.cli.main.cli`, the same entry point as the
``fr`` console script.
"""

from __future__ import annotations

from frontrange.cli.main import cli

if __name__ == "__main__":
    cli()
