# topmark:header:start
#
#   project      : FrontRange
#   file         : test_cli_config.py
#   file_relpath : tests/cli/test_cli_config.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""CLI tests for config discovery, `config show`/`config path` and overrides.

HOME and XDG_CONFIG_HOME point into `tmp_path` (see the root conftest), so
only config files created by a test are found.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import tomlkit

from frontrange.cli.exit_codes import ExitCode
from frontrange.config.model import DEFAULT_PROFILE
from tests.cli.conftest import assert_SUCCESS, read_doc, run_cli_in, write_doc
from tests.conftest import mark_cli, mark_config

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def _project_config(root: Path, text: str) -> Path:
    return write_doc(root, ".fr/config.toml", text)


def _global_config(text: str) -> Path:
    home = Path(os.environ["XDG_CONFIG_HOME"])
    return write_doc(home, "frontrange/config.toml", text)


def _shown(stdout: str) -> dict[str, object]:
    return tomlkit.parse(stdout).unwrap()["format"]


@mark_cli
@mark_config
def test_show_defaults(tmp_path: Path) -> None:
    """Without config files the built-in defaults are shown."""
    result = run_cli_in(tmp_path, ["config", "show"])
    assert_SUCCESS(result)
    assert _shown(result.stdout) == DEFAULT_PROFILE.to_toml_table()


@mark_cli
@mark_config
def test_show_applies_layers(tmp_path: Path) -> None:
    """Global < project < command line."""
    _global_config("indent = 4\nwidth = 60\n")
    _project_config(tmp_path, "[format]\nindent = 3\n")
    result = run_cli_in(tmp_path, ["config", "show"])
    assert_SUCCESS(result)
    shown = _shown(result.stdout)
    assert shown["indent"] == 3
    assert shown["width"] == 60

    result = run_cli_in(tmp_path, ["--indent", "6", "config", "show"])
    assert _shown(result.stdout)["indent"] == 6

    result = run_cli_in(tmp_path, ["--no-config", "config", "show"])
    assert _shown(result.stdout)["indent"] == 2


@mark_cli
@mark_config
def test_show_reports_layers_when_verbose(tmp_path: Path) -> None:
    """-v lists which fields each layer sets."""
    _project_config(tmp_path, "sort_keys = true\n")
    result = run_cli_in(tmp_path, ["-v", "config", "show"])
    assert_SUCCESS(result)
    assert "# project: sort_keys" in result.stderr


@mark_cli
@mark_config
def test_path_lists_files_lowest_first(tmp_path: Path) -> None:
    """The global file comes before the project file."""
    global_cfg = _global_config("indent = 4\n")
    project_cfg = _project_config(tmp_path, "indent = 3\n")
    (tmp_path / "sub").mkdir()
    result = run_cli_in(tmp_path, ["config", "path", "sub"])
    assert_SUCCESS(result)
    listed = [Path(line).resolve() for line in result.stdout.splitlines()]
    assert listed == [global_cfg.resolve(), project_cfg.resolve()]


@mark_cli
@mark_config
def test_path_without_files(tmp_path: Path) -> None:
    """Nothing is printed when only defaults apply."""
    result = run_cli_in(tmp_path, ["-v", "config", "path"])
    assert_SUCCESS(result)
    assert result.stdout == ""
    assert "No config files found; using built-in defaults." in result.stderr


@mark_cli
@mark_config
def test_malformed_config_is_a_config_error(tmp_path: Path, sample_text: str) -> None:
    """A broken config file aborts with CONFIG_ERROR."""
    _project_config(tmp_path, "indent = 'wide'\n")
    write_doc(tmp_path, "post.md", sample_text)
    result = run_cli_in(tmp_path, ["config", "show"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "config.toml" in result.stderr

    result = run_cli_in(tmp_path, ["set", "title", "X", "post.md"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert read_doc(tmp_path / "post.md") == sample_text


@mark_cli
@mark_config
def test_project_config_shapes_written_files(tmp_path: Path, sample_text: str) -> None:
    """Edits are written with the profile found next to the file."""
    _project_config(tmp_path, '[format]\nsequence_style = "flow"\n')
    path = write_doc(tmp_path, "post.md", sample_text)
    assert_SUCCESS(run_cli_in(tmp_path, ["set", "title", "X", "post.md"]))
    assert "tags: [python, yaml]\n" in read_doc(path)

    assert_SUCCESS(
        run_cli_in(tmp_path, ["--sequence-style", "block", "set", "title", "Y", "post.md"])
    )
    assert "tags:\n- python\n- yaml\n" in read_doc(path)


@mark_cli
@mark_config
def test_nested_project_config_wins_per_file(tmp_path: Path) -> None:
    """Each file uses the nearest project config above it."""
    _project_config(tmp_path, "indent = 4\n")
    _project_config(tmp_path / "docs", "indent = 3\n")
    top = write_doc(tmp_path, "top.md", "---\na: {b: 1}\n---\n")
    nested = write_doc(tmp_path, "docs/nested.md", "---\na: {b: 1}\n---\n")
    args = ["--mapping-style", "block", "set", "c", "2", "top.md", "docs/nested.md"]
    assert_SUCCESS(run_cli_in(tmp_path, args))
    assert read_doc(top) == "---\na:\n    b: 1\nc: 2\n---\n"
    assert read_doc(nested) == "---\na:\n   b: 1\nc: 2\n---\n"
