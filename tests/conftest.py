# topmark:header:start
#
#   project      : LogCompose
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LogCompose test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `logcompose.config.MutableFormatConfig` (mutable), then
      `freeze()` into a `logcompose.config.FormatConfig` for rendering calls.
    - Do **not** mutate a frozen `FormatConfig`. If you need to tweak one,
      call `FormatConfig.thaw()`, edit the returned builder, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from logcompose.config import MutableFormatConfig, logging

if TYPE_CHECKING:
    from pathlib import Path

    from logcompose.config import FormatConfig

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


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_logcompose_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure LogCompose's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise on the CLI's stderr when the developer
    has exported LOGCOMPOSE_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("LOGCOMPOSE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Set the logging level to TRACE so renderer diagnostics run in every test.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory.

    Configuration discovery walks up from the working directory, so tests that
    exercise it must not see the repository's own ``pyproject.toml``.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory (``<tmp_path>/proj``).
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> FormatConfig:
    """Return a frozen `FormatConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Field overrides applied to the mutable builder before freezing.

    Returns:
        FormatConfig: An immutable configuration snapshot.
    """
    m: MutableFormatConfig = MutableFormatConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
