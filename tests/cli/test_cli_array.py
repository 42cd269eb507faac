# topmark:header:start
#
#   project      : FrontRange
#   file         : test_cli_array.py
#   file_relpath : tests/cli/test_cli_array.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""CLI tests for the `array` command group."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from frontrange.document.parser import parse_document
from tests.cli.conftest import (
    assert_FAILURE,
    assert_NOT_FOUND,
    assert_SUCCESS,
    read_doc,
    run_cli_in,
    write_doc,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def _tags(path: Path) -> Any:
    return parse_document(read_doc(path)).get_value("tags")


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """Four files: two tagged, one untagged, one without front matter."""
    write_doc(tmp_path, "a.md", "---\ntags: [python, yaml]\n---\nA\n")
    write_doc(tmp_path, "b.md", "---\ntags: [go]\n---\nB\n")
    write_doc(tmp_path, "c.md", "---\ntitle: no tags\n---\nC\n")
    write_doc(tmp_path, "d.md", "just text\n")
    return tmp_path


@mark_cli
def test_append_and_prepend(tmp_path: Path, sample_text: str) -> None:
    """Values go to the end or the start of the sequence."""
    path = write_doc(tmp_path, "post.md", sample_text)
    assert_SUCCESS(run_cli_in(tmp_path, ["array", "append", "tags", "rust", "post.md"]))
    assert _tags(path) == ["python", "yaml", "rust"]
    assert_SUCCESS(run_cli_in(tmp_path, ["array", "prepend", "tags", "go", "post.md"]))
    assert _tags(path) == ["go", "python", "yaml", "rust"]
    assert read_doc(path).endswith("---\n# Hello\n\nBody text stays exactly as written.\n")


@mark_cli
def test_append_keeps_flow_style(tmp_path: Path) -> None:
    """A flow sequence stays a flow sequence."""
    path = write_doc(tmp_path, "a.md", "---\ntags: [python]\n---\n")
    assert_SUCCESS(run_cli_in(tmp_path, ["array", "append", "tags", "yaml", "a.md"]))
    assert read_doc(path) == "---\ntags: [python, yaml]\n---\n"


@mark_cli
@pytest.mark.parametrize(
    "args",
    [
        ["--skip-duplicates", "tags", "python"],
        ["--skip-duplicates", "-i", "tags", "PYTHON"],
    ],
)
def test_skip_duplicates_leaves_file_alone(
    tmp_path: Path, sample_text: str, args: list[str]
) -> None:
    """An existing value is not added twice and the file is not rewritten."""
    path = write_doc(tmp_path, "post.md", sample_text)
    result = run_cli_in(tmp_path, ["-v", "array", "append", *args, "post.md"])
    assert_SUCCESS(result)
    assert read_doc(path) == sample_text
    assert "Updated 0 file(s), skipped 1" in result.stderr


@mark_cli
def test_skip_duplicates_is_case_sensitive_by_default(tmp_path: Path, sample_text: str) -> None:
    """Without -i a differently cased value is new."""
    path = write_doc(tmp_path, "post.md", sample_text)
    args = ["array", "prepend", "--skip-duplicates", "tags", "Python", "post.md"]
    assert_SUCCESS(run_cli_in(tmp_path, args))
    assert _tags(path) == ["Python", "python", "yaml"]


@mark_cli
def test_insert_errors(tmp_path: Path, sample_text: str) -> None:
    """Missing keys and non-array values fail per file."""
    write_doc(tmp_path, "post.md", sample_text)
    result = run_cli_in(tmp_path, ["array", "append", "nope", "x", "post.md"])
    assert_FAILURE(result)
    assert "post.md: key not found: 'nope'" in result.stderr

    result = run_cli_in(tmp_path, ["array", "append", "title", "x", "post.md"])
    assert_FAILURE(result)
    assert "value of 'title' is not an array" in result.stderr


@mark_cli
def test_remove_first_match(tmp_path: Path) -> None:
    """Only the first equal element is removed."""
    path = write_doc(tmp_path, "a.md", "---\ntags: [x, Y, y]\n---\n")
    assert_SUCCESS(run_cli_in(tmp_path, ["array", "remove", "-i", "tags", "y", "a.md"]))
    assert _tags(path) == ["x", "y"]


@mark_cli
def test_remove_reports_when_nothing_changed(corpus: Path) -> None:
    """No match anywhere is a warning, not a failure."""
    result = run_cli_in(corpus, ["array", "remove", "tags", "rust", "a.md", "b.md"])
    assert_SUCCESS(result)
    assert "No files were modified (value 'rust' not found in any arrays)" in result.stderr
    assert read_doc(corpus / "a.md") == "---\ntags: [python, yaml]\n---\nA\n"


@mark_cli
def test_contains_lists_matching_files(corpus: Path) -> None:
    """Unparseable files and files without the array are skipped silently."""
    files = ["a.md", "b.md", "c.md", "d.md"]
    result = run_cli_in(corpus, ["array", "contains", "tags", "python", *files])
    assert_SUCCESS(result)
    assert result.stdout == "a.md\n"
    assert result.stderr == ""

    result = run_cli_in(corpus, ["array", "contains", "--invert", "tags", "python", *files])
    assert result.stdout == "b.md\n"

    result = run_cli_in(corpus, ["array", "contains", "-i", "tags", "PYTHON", *files])
    assert result.stdout == "a.md\n"

    result = run_cli_in(corpus, ["array", "contains", "--format", "json", "tags", "go", *files])
    assert json.loads(result.stdout) == ["b.md"]


@mark_cli
@pytest.mark.parametrize(
    ("flags", "message"),
    [
        ([], "No files found where 'tags' array contains 'rust'"),
        (["--invert"], "No files found where 'tags' array NOT contains 'yaml'"),
    ],
)
def test_contains_without_matches(corpus: Path, flags: list[str], message: str) -> None:
    """No match exits with NOT_FOUND."""
    value = "yaml" if flags else "rust"
    result = run_cli_in(corpus, ["array", "contains", *flags, "tags", value, "a.md"])
    assert_NOT_FOUND(result)
    assert result.stdout == ""
    assert message in result.stderr
