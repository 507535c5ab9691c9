"""Demo command - build a task list in memory and render it."""

from datetime import datetime
from enum import Enum
from typing import get_args

import typer

from taskkeeper.models import DEFAULT_CATEGORY, Task
from taskkeeper.models.config_models import OutputFormat
from taskkeeper.services.config_service import get_config_service
from taskkeeper.services.task_manager import TaskManager
from taskkeeper.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from taskkeeper.utils.ui.console import color_output
from taskkeeper.utils.ui.formatters import format_output, format_warning

from .decorators import AppError, command_wrapper

OUTPUT_FORMATS = get_args(OutputFormat)


class View(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"
    WORK = "work"
    PERSONAL = "personal"
    OVERDUE = "overdue"


class Kind(str, Enum):
    GENERIC = "generic"
    WORK = "work"
    PERSONAL = "personal"


def add_from_input(
    manager: TaskManager,
    kind: Kind,
    title: str,
    *,
    project: str = "",
    category: str = "",
    location: str = "",
    deadline: datetime | None = None,
    priority: int = 1,
) -> Task | None:
    """Add a task from raw form values.

    An empty title adds nothing, a work task needs a project, and an empty
    category or location falls back to the defaults.

    Returns:
        The created task, or None when the input was rejected
    """
    if not title:
        format_warning("Task not added: the title is empty")
        return None

    if kind is Kind.WORK:
        if not project:
            format_warning("Task not added: work tasks need a project")
            return None
        return manager.add_work_task(title, project, deadline=deadline, priority=priority)

    if kind is Kind.PERSONAL:
        return manager.add_personal_task(
            title,
            category or DEFAULT_CATEGORY,
            location=location or None,
            priority=priority,
        )

    return manager.add_task(title, priority=priority)


def select_tasks(manager: TaskManager, view: View, by_priority: bool) -> list[Task]:
    """Pick the tasks for a view, optionally reordered by priority."""
    if view is View.COMPLETED:
        tasks = manager.completed_tasks
    elif view is View.INCOMPLETE:
        tasks = manager.incomplete_tasks
    elif view is View.WORK:
        tasks = manager.work_tasks
    elif view is View.PERSONAL:
        tasks = manager.personal_tasks
    elif view is View.OVERDUE:
        tasks = manager.overdue_tasks()
    else:
        tasks = manager.all_tasks

    if by_priority:
        order = {task.id: pos for pos, task in enumerate(manager.get_tasks_by_priority())}
        tasks = sorted(tasks, key=lambda task: order[task.id])
    return tasks


@command_wrapper
def demo(
    add: str | None = typer.Option(None, "--add", "-a", help="Title of a task to add"),
    kind: Kind = typer.Option(Kind.GENERIC, "--kind", "-k", help="Kind of the added task"),
    project: str = typer.Option("", "--project", help="Project of an added work task"),
    deadline: datetime | None = typer.Option(
        None, "--deadline", help="Deadline of an added work task"
    ),
    category: str = typer.Option(
        "", "--category", help="Category of an added personal task"
    ),
    location: str = typer.Option(
        "", "--location", help="Location of an added personal task"
    ),
    priority: int = typer.Option(1, "--priority", help="Priority of the added task"),
    view: View = typer.Option(View.ALL, "--view", "-v", help="Which tasks to show"),
    by_priority: bool = typer.Option(
        False, "--by-priority", "-p", help="Order by descending priority"
    ),
    toggle: list[int] | None = typer.Option(
        None, "--toggle", "-t", help="Toggle completion of a task ID (repeatable)"
    ),
    delete: list[int] | None = typer.Option(
        None, "--delete", "-d", help="Delete a task ID (repeatable)"
    ),
    seed: bool | None = typer.Option(
        None, "--seed/--no-seed", help="Start with the example tasks"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty, table, json, yaml)"
    ),
    compact: bool = typer.Option(False, "--compact", help="Compact output"),
) -> None:
    """Build an in-memory task list from the example tasks and show it.

    Steps run in order: seed, add, toggle, delete, render.
    """
    config = get_config_service().config
    manager = TaskManager()

    output_format = output or config.output.format
    if output_format not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output_format}'", exit_code=ERROR_INVALID_ARGS
        )

    with color_output(config.output.color):
        if config.demo.seed_examples if seed is None else seed:
            manager.seed_examples()

        if add is not None:
            add_from_input(
                manager,
                kind,
                add,
                project=project,
                category=category,
                location=location,
                deadline=deadline,
                priority=priority,
            )

        for task_id in toggle or []:
            task = manager.get_task_by_id(task_id)
            if task is None:
                raise AppError(f"Task #{task_id} not found", exit_code=ERROR_NOT_FOUND)
            task.toggle_completion()

        for task_id in delete or []:
            if not manager.delete_task(task_id):
                raise AppError(f"Task #{task_id} not found", exit_code=ERROR_NOT_FOUND)

        format_output(
            select_tasks(manager, view, by_priority),
            output_format,
            compact=compact or config.output.compact,
            icons=config.output.icons,
        )
