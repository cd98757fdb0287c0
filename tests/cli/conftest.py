# topmark:header:start
#
#   project      : LogCompose
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running LogCompose in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory before
invoking the Click CLI, so configuration discovery (``logcompose.toml`` /
``pyproject.toml``) sees the files a test created there and nothing else.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from logcompose.cli.exit_codes import ExitCode
from logcompose.cli.main import cli
from logcompose.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_suite_logging() -> Iterator[None]:
    """Reinstate suite logging after the CLI reconfigured it for its own streams."""
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli_in(
    cwd: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory used as the working directory for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["render", "[1]"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input for
            ``--stdin`` modes.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        (tmp_path / "logcompose.toml").write_text("[format]\\nmax_depth = 1\\n")
        res = run_cli_in(tmp_path, ["render", "[[1]]"])
        assert res.output.strip() == "[[...]]"
        ```
    """
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(previous)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_INPUT_ERROR(result: Result) -> None:
    """Assert that the command exited with INPUT_ERROR (code 65).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.INPUT_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_CLICK_USAGE(result: Result) -> None:
    """Assert that Click itself rejected the invocation (code 2).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == 2, result.output
