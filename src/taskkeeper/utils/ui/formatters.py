"""Output formatters for different formats."""

import json
from collections.abc import Sequence
from datetime import datetime
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from taskkeeper.models import BaseTask, Task

from .console import get_console

console = get_console()


# Kind Icons & Colors
KIND_ICONS = {
    "work": "💼",
    "personal": "🏠",
    "generic": "✅",
}

KIND_ASCII = {
    "work": "[W]",
    "personal": "[P]",
    "generic": "[T]",
}

KIND_COLORS = {
    "work": "blue",
    "personal": "green",
    "generic": "orange3",
}

# Status Icons
STATUS_ICONS = {
    "open": "⬜",
    "completed": "☑️",
}


def priority_color(priority: int) -> str:
    """Badge colour for a priority level."""
    if priority > 2:
        return "bold red"
    if priority > 1:
        return "bold orange3"
    return "green"


def task_to_dict(task: BaseTask, now: datetime | None = None) -> dict[str, Any]:
    """Plain JSON-ready mapping for a task, including the overdue flag for work tasks."""
    data = task.model_dump(mode="json")
    if task.kind == "work":
        data["is_overdue"] = task.is_overdue(now)
    return data


def format_output(
    tasks: Sequence[Task],
    output_format: str = "pretty",
    compact: bool = False,
    icons: bool = True,
) -> None:
    """Format and display tasks based on format."""
    if output_format == "json":
        print(json.dumps([task_to_dict(t) for t in tasks], indent=2, ensure_ascii=False))
    elif output_format == "yaml":
        print(
            yaml.dump(
                [task_to_dict(t) for t in tasks],
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        )
    elif output_format == "table":
        format_table(tasks)
    else:
        format_tasks_pretty(tasks, compact=compact, icons=icons)


def format_table(tasks: Sequence[Task]) -> None:
    """Format tasks as a table."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    for col in ("ID", "Kind", "Title", "Done", "Priority", "Details"):
        table.add_column(col)

    for task in tasks:
        table.add_row(
            str(task.id),
            Text(task.kind, style=KIND_COLORS[task.kind]),
            task.title,
            "✓" if task.is_completed else "✗",
            Text(str(task.priority), style=priority_color(task.priority)),
            describe_task(task) or "-",
        )

    console.print(table)


def describe_task(task: Task) -> str:
    """Variant-specific subtitle for a task."""
    if task.kind == "work":
        text = f"Project: {task.project}"
        if task.deadline is not None:
            text += f" | Due: {task.deadline.date().isoformat()}"
        if task.is_overdue():
            text += " (OVERDUE)"
        return text
    if task.kind == "personal":
        text = f"Category: {task.category}"
        if task.location:
            text += f" | Location: {task.location}"
        return text
    return ""


def format_tasks_pretty(
    tasks: Sequence[Task], compact: bool = False, icons: bool = True
) -> None:
    """Format tasks in pretty format."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    active = [t for t in tasks if not t.is_completed]

    header = Text()
    header.append("📋 Tasks " if icons else "Tasks ", style="bold cyan")
    header.append(f"({len(active)} active, {len(tasks) - len(active)} completed)", style="dim")
    console.print(header)
    console.print()

    for task in tasks:
        format_task_item(task, compact=compact, icons=icons, indent="  ")


def format_task_item(
    task: Task, compact: bool = False, icons: bool = True, indent: str = ""
) -> None:
    """Format a single task item."""
    line = Text(indent)

    if icons:
        status_icon = STATUS_ICONS["completed" if task.is_completed else "open"]
        line.append(f"{status_icon} ")
        line.append(f"{KIND_ICONS[task.kind]} ", style=KIND_COLORS[task.kind])
    else:
        line.append("[x] " if task.is_completed else "[ ] ")
        line.append(f"{KIND_ASCII[task.kind]} ", style=KIND_COLORS[task.kind])

    title_style = "strike dim" if task.is_completed else ("bold" if task.priority > 2 else "")
    line.append(task.title, style=title_style)
    line.append("  ")
    line.append(f"({task.priority})", style=priority_color(task.priority))
    line.append(f"  #{task.id}", style="dim")
    console.print(line)

    if compact:
        return

    details = describe_task(task)
    if details:
        meta_line = Text()
        meta_line.append(f"{indent}   └─ ", style="dim")
        overdue = task.kind == "work" and task.is_overdue()
        meta_line.append(details, style="bold red" if overdue else KIND_COLORS[task.kind])
        console.print(meta_line)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")
