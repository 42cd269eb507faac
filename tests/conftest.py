# topmark:header:start
#
#   project      : FrontRange
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Pytest configuration for the FrontRange test suite.

Sets up TRACE-level logging for the run and keeps the developer's
environment (log level, config locations) from leaking into tests.

Notes:
    Documents are immutable. Tests that edit a document must use the returned
    instance; the receiver is expected to stay unchanged, and several tests
    assert exactly that.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from frontrange.config import logging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)
mark_property: DecoratorType[Any] = as_typed_mark(pytest.mark.property)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell environment out of the tests.

    Removes ``FRONTRANGE_LOG_LEVEL`` and ``FORCE_COLOR`` and points ``HOME`` and
    ``XDG_CONFIG_HOME`` at empty directories, so no user config is picked up.

    Args:
        tmp_path (Path): Per-test temporary directory.
        monkeypatch (pytest.MonkeyPatch): Fixture used to edit the environment.
    """
    monkeypatch.delenv("FRONTRANGE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    home = tmp_path / "_home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything at TRACE level during the test run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


SAMPLE_DOCUMENT = """\
---
title: Hello World
draft: false
tags:
  - python
  - yaml
author:
  name: Ada
  email: ada@example.com
---
# Hello

Body text stays exactly as written.
"""


@pytest.fixture
def sample_text() -> str:
    """A small front-mattered Markdown document."""
    return SAMPLE_DOCUMENT
