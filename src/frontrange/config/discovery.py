# topmark:header:start
#
#   project      : FrontRange
#   file         : discovery.py
#   file_relpath : src/frontrange/config/discovery.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Locate and load FrontRange config files.

All filesystem access goes through a [`ConfigSource`][frontrange.config.discovery.ConfigSource],
so tests can describe a synthetic directory tree with
[`MemoryConfigSource`][frontrange.config.discovery.MemoryConfigSource] instead of
touching the real filesystem.

Rules:
    - A missing config file is not an error (`None` is returned).
    - A config path that exists but is a directory, cannot be read, is not
      valid TOML or holds invalid values raises
      [`ConfigFileError`][frontrange.core.errors.ConfigFileError].
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Protocol

from tomlkit.exceptions import ParseError as TomlkitParseError

from frontrange.config.io import parse_toml_text
from frontrange.config.logging import get_logger
from frontrange.config.model import PartialConfig
from frontrange.constants import CONFIG_FILE_NAME, PROJECT_CONFIG_DIR, XDG_CONFIG_SUBDIR
from frontrange.core.errors import ConfigFileError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from frontrange.config.logging import FrontRangeLogger

logger: FrontRangeLogger = get_logger(__name__)


class ConfigSource(Protocol):
    """Minimal filesystem capability needed to find and read config files."""

    def exists(self, path: Path) -> bool:
        """Return True if anything exists at `path`."""
        ...

    def is_file(self, path: Path) -> bool:
        """Return True if `path` is a regular file."""
        ...

    def read_text(self, path: Path) -> str:
        """Return the UTF-8 contents of `path`; raises OSError on failure."""
        ...


class LocalConfigSource:
    """ConfigSource backed by the real filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")


class MemoryConfigSource:
    """ConfigSource over an in-memory ``{path: contents}`` map.

    Every ancestor directory of a listed file is reported as existing, and so
    are paths listed in `directories`.
    """

    def __init__(
        self,
        files: Mapping[str | PurePath, str] | None = None,
        directories: tuple[str | PurePath, ...] = (),
    ) -> None:
        self._files: dict[PurePath, str] = {PurePath(p): t for p, t in (files or {}).items()}
        dirs: set[PurePath] = {PurePath(d) for d in directories}
        for p in self._files:
            dirs.update(p.parents)
        self._dirs: set[PurePath] = dirs

    def exists(self, path: Path) -> bool:
        p = PurePath(path)
        return p in self._files or p in self._dirs

    def is_file(self, path: Path) -> bool:
        return PurePath(path) in self._files

    def read_text(self, path: Path) -> str:
        try:
            return self._files[PurePath(path)]
        except KeyError:
            raise FileNotFoundError(str(path)) from None


def load_config_file(path: Path, source: ConfigSource | None = None) -> PartialConfig | None:
    """Load one config file.

    Returns:
        PartialConfig | None: The parsed preferences, or None if nothing exists at `path`.

    Raises:
        ConfigFileError: If `path` exists but is not a readable, well-formed config file.
    """
    src: ConfigSource = source or LocalConfigSource()
    if not src.exists(path):
        logger.trace("No config file at %s", path)
        return None
    if not src.is_file(path):
        raise ConfigFileError(path, "not a regular file")

    try:
        text = src.read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigFileError(path, f"cannot read file: {exc}") from exc

    try:
        data = parse_toml_text(text)
    except TomlkitParseError as exc:
        raise ConfigFileError(path, f"invalid TOML: {exc}") from exc

    try:
        partial = PartialConfig.from_toml_table(data, where=path.name)
    except ValueError as exc:
        raise ConfigFileError(path, str(exc)) from exc

    logger.debug("Loaded config %s: sets %s", path, ", ".join(partial.set_fields()) or "nothing")
    return partial


def project_config_path(directory: Path) -> Path:
    """Return the project config location inside `directory`."""
    return directory / PROJECT_CONFIG_DIR / CONFIG_FILE_NAME


def find_project_config(start: Path, source: ConfigSource | None = None) -> Path | None:
    """Walk upward from `start` and return the nearest project config file.

    The search checks `start` itself first, then each parent, and stops at the
    filesystem root. When `start` names a file, the search starts at its parent.
    Returns None when no directory on the way holds ``.fr/config.toml``.

    A config *path* that exists but is a directory is still returned so the
    loader can report it as malformed.
    """
    src: ConfigSource = source or LocalConfigSource()
    cur: Path = Path(os.path.abspath(start))
    if src.is_file(cur):
        cur = cur.parent

    while True:
        candidate = project_config_path(cur)
        if src.exists(candidate):
            logger.debug("Discovered project config: %s", candidate)
            return candidate
        parent = cur.parent
        if parent == cur:
            logger.trace("No project config above %s", start)
            return None
        cur = parent


def global_config_candidates(environ: Mapping[str, str] | None = None) -> list[Path]:
    """Return user-scoped config paths in lookup order.

    ``$XDG_CONFIG_HOME/frontrange/config.toml`` (defaulting to ``~/.config``)
    comes first, then the legacy ``~/.fr/config.toml``.
    """
    env = os.environ if environ is None else environ
    home = Path(env.get("HOME") or Path.home())
    xdg = env.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else home / ".config"
    return [
        base / XDG_CONFIG_SUBDIR / CONFIG_FILE_NAME,
        home / PROJECT_CONFIG_DIR / CONFIG_FILE_NAME,
    ]


def find_global_config(
    source: ConfigSource | None = None, environ: Mapping[str, str] | None = None
) -> Path | None:
    """Return the first existing user-scoped config path, or None."""
    src: ConfigSource = source or LocalConfigSource()
    for candidate in global_config_candidates(environ):
        if src.exists(candidate):
            logger.debug("Discovered global config: %s", candidate)
            return candidate
    return None
