# topmark:header:start
#
#   project      : FrontRange
#   file         : __init__.py
#   file_relpath : src/frontrange/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""One module per `fr` subcommand (or subcommand group)."""
