"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table

from taskmirror.models import Task, TaskStatistics
from taskmirror.utils.ui.console import get_console

console = get_console()

OUTPUT_FORMATS = ("table", "json", "yaml")


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        format_table(data)


def format_table(data: Any) -> None:
    """Format a dict or a list of dicts as a table."""
    if not data:
        console.print("[notice]No data to display[/notice]")
        return

    rows = data if isinstance(data, list) else [data]
    table = Table(show_header=True, header_style="header")
    for key in rows[0]:
        table.add_column(str(key))
    for row in rows:
        table.add_row(*(escape(str(value)) for value in row.values()))
    console.print(table)


def format_tasks(tasks: list[Task], output_format: str = "table") -> None:
    """Display a task list."""
    if output_format != "table":
        format_output([task.model_dump() for task in tasks], output_format)
        return

    if not tasks:
        console.print("[notice]No tasks[/notice]")
        return

    table = Table(show_header=True, header_style="header")
    table.add_column("ID", style="muted")
    table.add_column("Title")
    table.add_column("Done", justify="center")
    for task in tasks:
        table.add_row(
            escape(task.id),
            escape(task.title_for_list),
            "[completed]✓[/completed]" if task.is_completed else "",
        )
    console.print(table)


def format_task(task: Task, output_format: str = "table") -> None:
    """Display a single task."""
    if output_format != "table":
        format_output(task.model_dump(), output_format)
        return

    if task.is_completed:
        status = "[completed]completed[/completed]"
    else:
        status = "[active]active[/active]"
    console.print(f"[bold]{escape(task.title_for_list)}[/bold] ({status})")
    console.print(task.id, style="muted", markup=False)
    if task.description and task.title.strip():
        console.print(task.description, markup=False)


def format_statistics(stats: TaskStatistics) -> None:
    """Display active/completed counts."""
    if stats.empty:
        console.print("[notice]You have no tasks.[/notice]")
        return
    console.print(
        f"Active tasks: [active]{stats.active}[/active] ({stats.active_percent:.1f}%)"
    )
    console.print(
        f"Completed tasks: [completed]{stats.completed}[/completed] "
        f"({stats.completed_percent:.1f}%)"
    )


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[error]Error:[/error] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[success]Success:[/success] {escape(message)}")
