# topmark:header:start
#
#   project      : FrontRange
#   file         : resolver.py
#   file_relpath : src/frontrange/config/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Resolve layered configuration into a RenderProfile.

Merge order (lowest → highest precedence):
    1) Built-in defaults (`RenderProfile()`)
    2) Global config (XDG / legacy ``~/.fr``)
    3) Nearest project ``.fr/config.toml`` found walking upward
    4) Explicit overrides (CLI flags or API arguments)

Each layer only overrides the fields it sets; anything still unset after the
last layer keeps its default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from frontrange.config.discovery import (
    find_global_config,
    find_project_config,
    load_config_file,
)
from frontrange.config.logging import get_logger
from frontrange.config.model import DEFAULT_PROFILE, PartialConfig, RenderProfile
from frontrange.config.types import ConfigLayer

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from frontrange.config.discovery import ConfigSource
    from frontrange.config.logging import FrontRangeLogger

logger: FrontRangeLogger = get_logger(__name__)


def resolve(
    sources: Iterable[PartialConfig | None],
    base: RenderProfile = DEFAULT_PROFILE,
) -> RenderProfile:
    """Merge `sources` left to right (lowest precedence first) over `base`.

    ``None`` entries are skipped, which lets callers pass the result of a
    config lookup directly.
    """
    merged = PartialConfig()
    for src in sources:
        if src is not None:
            merged = merged.merge_with(src)
    return merged.resolve(base)


@dataclass(frozen=True)
class ResolvedProfile:
    """Outcome of a layered resolution.

    Attributes:
        profile (RenderProfile): The effective profile.
        config_files (tuple[Path, ...]): Config files that contributed, lowest precedence first.
        layers (tuple[tuple[ConfigLayer, PartialConfig], ...]): Every applied layer
            (defaults excluded), for diagnostics such as ``fr config show``.
    """

    profile: RenderProfile
    config_files: tuple[Path, ...] = ()
    layers: tuple[tuple[ConfigLayer, PartialConfig], ...] = field(default=())


def load_layered(
    start: Path | None = None,
    overrides: PartialConfig | None = None,
    *,
    source: ConfigSource | None = None,
    environ: Mapping[str, str] | None = None,
    use_global: bool = True,
    use_project: bool = True,
) -> ResolvedProfile:
    """Run the four-layer resolution.

    Args:
        start (Path | None): Directory (or file) where the project search begins;
            defaults to the current working directory.
        overrides (PartialConfig | None): Highest-precedence layer.
        source (ConfigSource | None): Filesystem capability; the real filesystem by default.
        environ (Mapping[str, str] | None): Environment used to locate the global config.
        use_global (bool): Consult the global config file.
        use_project (bool): Search for a project config file.

    Raises:
        ConfigFileError: If a discovered config file is malformed.
    """
    layers: list[tuple[ConfigLayer, PartialConfig]] = []
    files: list[Path] = []

    global_path: Path | None = None
    if use_global:
        global_path = find_global_config(source, environ)
        if global_path is not None:
            cfg = load_config_file(global_path, source)
            if cfg is not None:
                layers.append((ConfigLayer.GLOBAL, cfg))
                files.append(global_path)

    if use_project:
        project_path = find_project_config(start or Path.cwd(), source)
        # The legacy global location doubles as the project config of $HOME
        if project_path is not None and project_path != global_path:
            cfg = load_config_file(project_path, source)
            if cfg is not None:
                layers.append((ConfigLayer.PROJECT, cfg))
                files.append(project_path)

    if overrides is not None and not overrides.is_empty():
        layers.append((ConfigLayer.OVERRIDES, overrides))

    profile = resolve(cfg for _, cfg in layers)
    logger.debug(
        "Resolved render profile from %s: %s",
        ", ".join(layer.value for layer, _ in layers) or "defaults",
        profile,
    )
    return ResolvedProfile(profile, tuple(files), tuple(layers))
