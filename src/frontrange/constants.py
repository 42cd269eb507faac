# topmark:header:start
#
#   project      : FrontRange
#   file         : constants.py
#   file_relpath : src/frontrange/constants.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""FrontRange Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    FRONTRANGE_VERSION: str = get_version("frontrange")
except PackageNotFoundError:  # running from a source checkout
    FRONTRANGE_VERSION = "0.0.0"

# Marker line that opens and closes the front matter block.
PREAMBLE_DELIMITER: str = "---"

# YAML version directive written before an explicit document-start marker.
YAML_VERSION: tuple[int, int] = (1, 1)

# Block indentation widths the YAML emitter honours.
MIN_INDENT: int = 2
MAX_INDENT: int = 9

# Project-scoped config, discovered by walking parent directories upward.
PROJECT_CONFIG_DIR: str = ".fr"
CONFIG_FILE_NAME: str = "config.toml"

# User-scoped config locations (XDG first, then the legacy dot-directory).
XDG_CONFIG_SUBDIR: str = "frontrange"

LOG_LEVEL_ENV_VAR: str = "FRONTRANGE_LOG_LEVEL"
