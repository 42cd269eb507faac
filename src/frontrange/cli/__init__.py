# topmark:header:start
#
#   project      : FrontRange
#   file         : __init__.py
#   file_relpath : src/frontrange/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Click-based command line interface (`fr`) for FrontRange."""
