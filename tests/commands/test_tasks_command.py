"""Tests for the task commands.

The commands run against a real TasksRepository built from an in-process
remote (no latency) and a temp-file SQLite mirror.
"""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from taskmirror.adapters import SimulatedRemoteTaskDataSource, SqliteTaskDataSource
from taskmirror.commands.tasks import app
from taskmirror.models import Task
from taskmirror.repositories import TasksRepository
from taskmirror.utils.exit_codes import (
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_UNAVAILABLE,
)

runner = CliRunner()

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def remote():
    return SimulatedRemoteTaskDataSource(latency=0)


@pytest.fixture()
def local(tmp_path):
    source = SqliteTaskDataSource(tmp_path / "tasks.db")
    yield source
    source.close()


@pytest.fixture()
def repository(remote, local):
    repo = TasksRepository(remote, local)
    with patch("taskmirror.commands.tasks.get_tasks_repository", return_value=repo):
        yield repo


def _invoke(*args, **kwargs):
    return runner.invoke(app, list(args), **kwargs)


def _list_json(*args) -> list[dict]:
    result = _invoke("list", "-o", "json", *args)
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


class TestList:
    def test_first_list_pulls_seed_tasks_from_remote(self, repository, remote):
        tasks = _list_json()

        assert [t["title"] for t in tasks] == [
            "Build tower in Pisa",
            "Finish bridge in Tacoma",
        ]

    def test_table_output_shows_titles(self, repository):
        result = _invoke("list")

        assert result.exit_code == 0
        assert "Build tower in Pisa" in result.output

    def test_remote_pull_is_mirrored_locally(self, repository, local):
        _list_json()

        rows = local.connection.execute(
            "SELECT title FROM tasks ORDER BY rowid"
        ).fetchall()

        assert [row["title"] for row in rows] == [
            "Build tower in Pisa",
            "Finish bridge in Tacoma",
        ]

    def test_filter_completed(self, repository):
        first = _list_json()[0]
        assert _invoke("complete", first["id"]).exit_code == 0

        completed = _list_json("--filter", "completed")
        active = _list_json("-f", "active")

        assert [t["id"] for t in completed] == [first["id"]]
        assert first["id"] not in [t["id"] for t in active]

    def test_empty_remote_prints_no_tasks(self, repository, remote):
        remote._tasks.clear()

        result = _invoke("list")

        assert result.exit_code == 0
        assert "No tasks" in result.output

    def test_unavailable_data_exits_with_code(self, repository, remote):
        remote.available = False

        result = _invoke("list")

        assert result.exit_code == ERROR_UNAVAILABLE
        assert "unavailable" in result.output

    def test_refresh_reloads_from_local_store(self, repository, remote, local):
        _list_json()
        remote.available = False

        tasks = _list_json("--refresh")

        assert len(tasks) == 2
        assert repository.is_dirty is False

    def test_unknown_output_format_rejected(self, repository):
        result = _invoke("list", "-o", "xml")

        assert result.exit_code == ERROR_INVALID_ARGS


# ---------------------------------------------------------------------------
# add / show / edit
# ---------------------------------------------------------------------------


class TestAddShowEdit:
    def test_add_then_show(self, repository):
        result = _invoke("add", "Buy milk", "-d", "two litres")
        assert result.exit_code == 0
        assert "Added task" in result.output

        task = next(t for t in _list_json() if t["title"] == "Buy milk")
        shown = _invoke("show", task["id"], "-o", "json")

        assert json.loads(shown.output) == {
            "id": task["id"],
            "title": "Buy milk",
            "description": "two litres",
            "is_completed": False,
        }

    def test_add_empty_task_fails(self, repository):
        result = _invoke("add", "  ")

        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Tasks cannot be empty" in result.output

    def test_show_unknown_task(self, repository):
        result = _invoke("show", "missing")

        assert result.exit_code == ERROR_NOT_FOUND

    def test_edit_title(self, repository):
        task = _list_json()[0]

        result = _invoke("edit", task["id"], "--title", "Straighten tower")

        assert result.exit_code == 0
        assert "Straighten tower" in result.output
        titles = [t["title"] for t in _list_json()]
        assert "Straighten tower" in titles

    def test_edit_without_changes_fails(self, repository):
        task = _list_json()[0]

        result = _invoke("edit", task["id"])

        assert result.exit_code == ERROR_INVALID_ARGS


# ---------------------------------------------------------------------------
# complete / activate / delete
# ---------------------------------------------------------------------------


class TestStateChanges:
    def test_complete_then_activate(self, repository, remote):
        task_id = _list_json()[0]["id"]

        assert "Completed" in _invoke("complete", task_id).output
        assert remote._tasks[task_id].is_completed is True

        assert "Activated" in _invoke("activate", task_id).output
        assert remote._tasks[task_id].is_completed is False

    def test_bracketed_title_is_printed_literally(self, repository):
        result = _invoke("add", "fix [/] bug", "-d", "[bold]not bold[/bold]")
        assert result.exit_code == 0, result.output
        task = next(t for t in _list_json() if t["title"] == "fix [/] bug")

        completed = _invoke("complete", task["id"])
        shown = _invoke("show", task["id"])
        listed = _invoke("list")

        assert completed.exit_code == 0
        assert "Completed: fix [/] bug" in completed.output
        assert shown.exit_code == 0
        assert "[bold]not bold[/bold]" in shown.output
        assert "fix [/] bug" in listed.output

    def test_complete_unknown_task(self, repository):
        result = _invoke("complete", "missing")

        assert result.exit_code == ERROR_NOT_FOUND
        assert "Task not found: missing" in result.output

    def test_delete_single_task(self, repository):
        first, second = _list_json()

        assert _invoke("delete", first["id"]).exit_code == 0

        assert [t["id"] for t in _list_json()] == [second["id"]]

    def test_delete_all_with_yes(self, repository, remote):
        _list_json()

        result = _invoke("delete-all", "--yes")

        assert result.exit_code == 0
        assert remote._tasks == {}
        assert repository.cached_tasks == {}

    def test_delete_all_declined_keeps_tasks(self, repository):
        _list_json()

        result = _invoke("delete-all", input="n\n")

        assert result.exit_code == 0
        assert len(repository.cached_tasks) == 2

    def test_clear_completed(self, repository):
        first, second = _list_json()
        _invoke("complete", first["id"])

        result = _invoke("clear-completed")

        assert result.exit_code == 0
        assert [t["id"] for t in _list_json()] == [second["id"]]


# ---------------------------------------------------------------------------
# stats
# ---------------------------------------------------------------------------


class TestStats:
    def test_counts(self, repository, remote):
        remote._tasks.clear()
        for task in (Task(title="a"), Task(title="b", is_completed=True)):
            remote._tasks[task.id] = task

        result = _invoke("stats")

        assert result.exit_code == 0
        assert "Active tasks: 1 (50.0%)" in result.output
        assert "Completed tasks: 1 (50.0%)" in result.output

    def test_no_tasks(self, repository, remote):
        remote._tasks.clear()

        result = _invoke("stats")

        assert result.exit_code == 0
        assert "You have no tasks." in result.output

    def test_unavailable(self, repository, remote):
        remote.available = False

        result = _invoke("stats")

        assert result.exit_code == ERROR_UNAVAILABLE
