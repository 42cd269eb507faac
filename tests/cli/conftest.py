# topmark:header:start
#
#   project      : FrontRange
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""CLI test helpers for running FrontRange in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative file names resolve against the
temporary test directory and project config discovery starts there.

Output assertions use `result.stdout` (command results) and `result.stderr`
(warnings and errors) separately.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from frontrange.cli.exit_codes import ExitCode
from frontrange.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["get", "title", "a.md"]`.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        result = run_cli_in(tmp_path, ["get", "title", "post.md"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this for commands that do not touch files (``--help``, ``version``)
    or when all paths are absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def write_doc(directory: Path, name: str, text: str) -> Path:
    """Create `directory/name` holding `text` (no newline translation)."""
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


def read_doc(path: Path) -> str:
    """Read a file back exactly as written."""
    return path.read_bytes().decode("utf-8")


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 2).

    Click's own usage errors (missing arguments, bad choices) share this code.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with NOT_FOUND (code 3)."""
    assert result.exit_code == ExitCode.NOT_FOUND, result.output
