# topmark:header:start
#
#   project      : FrontRange
#   file         : test_config_resolver.py
#   file_relpath : tests/config/test_config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Tests for layered configuration resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from frontrange.config.discovery import MemoryConfigSource
from frontrange.config.model import DEFAULT_PROFILE, PartialConfig
from frontrange.config.resolver import load_layered
from frontrange.config.types import ConfigLayer
from frontrange.core.errors import ConfigFileError
from tests.conftest import mark_config

pytestmark: pytest.MarkDecorator = pytest.mark.config

ENV = {"HOME": "/home/u"}
GLOBAL = "/home/u/.config/frontrange/config.toml"
PROJECT = "/home/u/work/.fr/config.toml"


@mark_config
def test_all_layers_in_order() -> None:
    """Defaults < global < project < overrides."""
    source = MemoryConfigSource(
        {
            GLOBAL: "indent = 4\nsort_keys = true\n",
            PROJECT: "[format]\nindent = 3\nwidth = 80\n",
        }
    )
    resolved = load_layered(
        Path("/home/u/work/notes"),
        PartialConfig(width=100),
        source=source,
        environ=ENV,
    )
    assert resolved.profile.indent == 3
    assert resolved.profile.width == 100
    assert resolved.profile.sort_keys is True
    assert resolved.config_files == (Path(GLOBAL), Path(PROJECT))
    assert [layer for layer, _ in resolved.layers] == [
        ConfigLayer.GLOBAL,
        ConfigLayer.PROJECT,
        ConfigLayer.OVERRIDES,
    ]


@mark_config
def test_no_files_gives_defaults() -> None:
    """With nothing on disk and no overrides the defaults apply."""
    resolved = load_layered(Path("/tmp/x"), source=MemoryConfigSource(), environ=ENV)
    assert resolved.profile == DEFAULT_PROFILE
    assert resolved.config_files == ()
    assert resolved.layers == ()


@mark_config
def test_empty_overrides_are_not_a_layer() -> None:
    """An override object that sets nothing is skipped."""
    resolved = load_layered(
        Path("/tmp/x"), PartialConfig(), source=MemoryConfigSource(), environ=ENV
    )
    assert resolved.layers == ()


@mark_config
def test_legacy_global_is_not_applied_twice() -> None:
    """~/.fr/config.toml is both the legacy global and the project config of $HOME."""
    legacy = "/home/u/.fr/config.toml"
    source = MemoryConfigSource({legacy: "indent = 5\n"})
    resolved = load_layered(Path("/home/u/notes"), source=source, environ=ENV)
    assert resolved.config_files == (Path(legacy),)
    assert [layer for layer, _ in resolved.layers] == [ConfigLayer.GLOBAL]
    assert resolved.profile.indent == 5


@mark_config
def test_layers_can_be_disabled() -> None:
    """Global and project lookups can be switched off."""
    source = MemoryConfigSource({GLOBAL: "indent = 4\n", PROJECT: "indent = 3\n"})
    start = Path("/home/u/work")
    only_project = load_layered(start, source=source, environ=ENV, use_global=False)
    assert only_project.profile.indent == 3
    only_global = load_layered(start, source=source, environ=ENV, use_project=False)
    assert only_global.profile.indent == 4
    neither = load_layered(
        start, source=source, environ=ENV, use_global=False, use_project=False
    )
    assert neither.profile == DEFAULT_PROFILE


@mark_config
def test_malformed_project_config_propagates() -> None:
    """A broken config file aborts resolution."""
    source = MemoryConfigSource({PROJECT: "indent = [\n"})
    with pytest.raises(ConfigFileError):
        load_layered(Path("/home/u/work"), source=source, environ=ENV)
