"""Tests for command_wrapper error mapping."""

from __future__ import annotations

import pytest
import typer

from taskmirror.commands.decorators import AppError, command_wrapper
from taskmirror.models import EmptyTaskError, SchemaVersionError, TaskNotFoundError
from taskmirror.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_UNAVAILABLE,
)


def test_sync_result_returned():
    @command_wrapper
    def cmd(x):
        return x * 2

    assert cmd(21) == 42


def test_coroutine_is_run():
    @command_wrapper
    async def cmd(x):
        return x + 1

    assert cmd(1) == 2


@pytest.mark.parametrize(
    "error, code",
    [
        (TaskNotFoundError("abc"), ERROR_NOT_FOUND),
        (EmptyTaskError(), ERROR_INVALID_ARGS),
        (SchemaVersionError(2, 1), ERROR_GENERAL),
        (AppError("gone", ERROR_UNAVAILABLE), ERROR_UNAVAILABLE),
        (RuntimeError("boom"), ERROR_GENERAL),
    ],
)
def test_errors_mapped_to_exit_codes(error, code, capsys):
    @command_wrapper
    async def cmd():
        raise error

    with pytest.raises(typer.Exit) as exc_info:
        cmd()

    assert exc_info.value.exit_code == code
    assert "Error:" in capsys.readouterr().out


def test_explicit_exit_passes_through():
    @command_wrapper
    def cmd():
        raise typer.Exit(0)

    with pytest.raises(typer.Exit) as exc_info:
        cmd()

    assert exc_info.value.exit_code == 0


def test_failure_is_logged(tmp_path):
    @command_wrapper
    def cmd():
        raise AppError("nope", ERROR_UNAVAILABLE)

    with pytest.raises(typer.Exit):
        cmd()

    log = (tmp_path / "logs" / "taskmirror.log").read_text()
    assert "command failed: cmd" in log
    assert "ERROR_UNAVAILABLE" in log
