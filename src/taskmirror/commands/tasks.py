"""Task commands of taskmirror."""

from typing import Annotated

import typer

from taskmirror.models import TaskFilter
from taskmirror.services.context_manager import get_tasks_repository
from taskmirror.services.statistics_service import StatisticsService
from taskmirror.services.task_service import TaskService
from taskmirror.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_UNAVAILABLE
from taskmirror.utils.ui.formatters import (
    OUTPUT_FORMATS,
    format_statistics,
    format_success,
    format_task,
    format_tasks,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Task management commands", no_args_is_help=True)

OutputOption = Annotated[
    str, typer.Option("--output", "-o", help="Output format (table, json, yaml)")
]


def _task_service() -> TaskService:
    return TaskService(get_tasks_repository())


def _check_output(output: str) -> None:
    if output not in OUTPUT_FORMATS:
        raise AppError(f"Unknown output format: {output}", ERROR_INVALID_ARGS)


@app.command("list")
@command_wrapper
async def list_command(
    status: Annotated[
        TaskFilter, typer.Option("--filter", "-f", help="Which tasks to show")
    ] = TaskFilter.ALL,
    refresh: Annotated[
        bool, typer.Option("--refresh", help="Reload from the data sources first")
    ] = False,
    output: OutputOption = "table",
) -> None:
    """List tasks."""
    _check_output(output)
    service = _task_service()
    if refresh:
        service.refresh()

    tasks = await service.list_tasks(status)
    if tasks is None:
        raise AppError("Task data is unavailable", ERROR_UNAVAILABLE)
    format_tasks(tasks, output)


@app.command("show")
@command_wrapper
async def show_command(
    task_id: Annotated[str, typer.Argument(help="Task ID")],
    output: OutputOption = "table",
) -> None:
    """Show a single task."""
    _check_output(output)
    task = await _task_service().get_task(task_id)
    format_task(task, output)


@app.command("add")
@command_wrapper
async def add_command(
    title: Annotated[str, typer.Argument(help="Task title")],
    description: Annotated[
        str, typer.Option("--description", "-d", help="Task description")
    ] = "",
) -> None:
    """Create a new task."""
    task = await _task_service().add_task(title, description)
    format_success(f"Added task {task.id}")


@app.command("edit")
@command_wrapper
async def edit_command(
    task_id: Annotated[str, typer.Argument(help="Task ID")],
    title: Annotated[
        str | None, typer.Option("--title", "-t", help="New title")
    ] = None,
    description: Annotated[
        str | None, typer.Option("--description", "-d", help="New description")
    ] = None,
) -> None:
    """Edit the title or description of a task."""
    if title is None and description is None:
        raise AppError("Nothing to update", ERROR_INVALID_ARGS)
    task = await _task_service().update_task(
        task_id, title=title, description=description
    )
    format_success(f"Updated: {task.title_for_list}")


@app.command("complete")
@command_wrapper
async def complete_command(
    task_id: Annotated[str, typer.Argument(help="Task ID")],
) -> None:
    """Mark a task as completed."""
    task = await _task_service().complete_task(task_id)
    format_success(f"Completed: {task.title_for_list}")


@app.command("activate")
@command_wrapper
async def activate_command(
    task_id: Annotated[str, typer.Argument(help="Task ID")],
) -> None:
    """Mark a completed task as active again."""
    task = await _task_service().activate_task(task_id)
    format_success(f"Activated: {task.title_for_list}")


@app.command("delete")
@command_wrapper
async def delete_command(
    task_id: Annotated[str, typer.Argument(help="Task ID")],
) -> None:
    """Delete a task."""
    await _task_service().delete_task(task_id)
    format_success(f"Deleted task {task_id}")


@app.command("delete-all")
@command_wrapper
async def delete_all_command(
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation")
    ] = False,
) -> None:
    """Delete every task.

    The simulated remote lives in memory and is seeded again by every run, so
    the sample tasks come back on the next list. Run
    `taskmirror config set remote.seed false` to keep the store empty.
    """
    if not yes and not typer.confirm("Delete all tasks?"):
        raise typer.Exit(0)
    await _task_service().delete_all_tasks()
    format_success("Deleted all tasks")


@app.command("clear-completed")
@command_wrapper
async def clear_completed_command() -> None:
    """Delete every completed task."""
    await _task_service().clear_completed_tasks()
    format_success("Cleared completed tasks")


@app.command("stats")
@command_wrapper
async def stats_command() -> None:
    """Show active and completed task counts."""
    stats = await StatisticsService(get_tasks_repository()).load_statistics()
    if stats.error:
        raise AppError("Task data is unavailable", ERROR_UNAVAILABLE)
    format_statistics(stats)
