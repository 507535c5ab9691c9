"""Task manager - in-memory owner of all tasks.

The manager is the only place tasks are created, looked up, mutated and
removed. It hands out integer ids from a counter that starts at 1 and never
goes backwards, so an id is never reused even after its task is deleted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime
from typing import cast

from taskkeeper.models import (
    DEFAULT_CATEGORY,
    GenericTask,
    PersonalTask,
    Task,
    TaskKind,
    WorkTask,
)

logger = logging.getLogger(__name__)


class TaskManager:
    """Service owning an insertion-ordered collection of tasks.

    Lookups and mutations that target an unknown id report it through a
    ``None`` or ``False`` return value instead of raising.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1

    def _allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    def _store(self, task: Task) -> None:
        self._tasks[task.id] = task
        logger.debug(
            "Task added id=%s kind=%s priority=%s", task.id, task.kind, task.priority
        )

    def _by_kind(self, kind: TaskKind) -> list[Task]:
        return [task for task in self._tasks.values() if task.kind == kind]

    # ---- creation ----

    def add_task(self, title: str, priority: int = 1) -> GenericTask:
        """Create and store a generic task.

        Args:
            title: Task title
            priority: Priority level

        Returns:
            The created task
        """
        task = GenericTask(id=self._allocate_id(), title=title, priority=priority)
        self._store(task)
        return task

    def add_work_task(
        self,
        title: str,
        project: str,
        deadline: datetime | None = None,
        priority: int = 1,
    ) -> WorkTask:
        """Create and store a work task.

        Args:
            title: Task title
            project: Project the task belongs to
            deadline: Optional deadline
            priority: Priority level

        Returns:
            The created task
        """
        task = WorkTask(
            id=self._allocate_id(),
            title=title,
            project=project,
            deadline=deadline,
            priority=priority,
        )
        self._store(task)
        return task

    def add_personal_task(
        self,
        title: str,
        category: str = DEFAULT_CATEGORY,
        location: str | None = None,
        priority: int = 1,
    ) -> PersonalTask:
        """Create and store a personal task.

        Args:
            title: Task title
            category: Grouping for the task
            location: Optional place where the task needs to be done
            priority: Priority level

        Returns:
            The created task
        """
        task = PersonalTask(
            id=self._allocate_id(),
            title=title,
            category=category,
            location=location,
            priority=priority,
        )
        self._store(task)
        return task

    def seed_examples(self) -> list[Task]:
        """Add the example tasks a fresh application starts with."""
        return [
            self.add_task("Buy groceries", priority=2),
            self.add_work_task("Complete project", "Flutter App", priority=3),
            self.add_personal_task("Go to gym", "Health", location="Fitness Center"),
        ]

    # ---- mutation ----

    def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        is_completed: bool | None = None,
        priority: int | None = None,
    ) -> bool:
        """Overwrite the common fields of a task.

        Only the provided arguments are applied. Variant-specific fields
        (project, deadline, category, location) are not reachable here.

        Args:
            task_id: Task ID to update
            title: New title
            is_completed: New completion status
            priority: New priority level

        Returns:
            True if the task exists, False otherwise

        Raises:
            ValidationError: If any provided value has the wrong type; the
                task is left unchanged
        """
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("Update skipped, task not found id=%s", task_id)
            return False

        changes = {
            name: value
            for name, value in (
                ("title", title),
                ("is_completed", is_completed),
                ("priority", priority),
            )
            if value is not None
        }
        # Validate every change before touching the stored record
        validated = task.copy_with(**changes)
        for name in changes:
            setattr(task, name, getattr(validated, name))

        logger.debug("Task updated id=%s", task_id)
        return True

    def delete_task(self, task_id: int) -> bool:
        """Remove a task permanently.

        Returns:
            True if a task was removed, False if no task had that id
        """
        removed = self._tasks.pop(task_id, None) is not None
        logger.debug("Task delete id=%s removed=%s", task_id, removed)
        return removed

    # ---- queries ----

    def get_task_by_id(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    @property
    def all_tasks(self) -> list[Task]:
        """Snapshot of every task in insertion order."""
        return list(self._tasks.values())

    @property
    def completed_tasks(self) -> list[Task]:
        return [task for task in self._tasks.values() if task.is_completed]

    @property
    def incomplete_tasks(self) -> list[Task]:
        return [task for task in self._tasks.values() if not task.is_completed]

    @property
    def generic_tasks(self) -> list[GenericTask]:
        return cast(list[GenericTask], self._by_kind("generic"))

    @property
    def work_tasks(self) -> list[WorkTask]:
        return cast(list[WorkTask], self._by_kind("work"))

    @property
    def personal_tasks(self) -> list[PersonalTask]:
        return cast(list[PersonalTask], self._by_kind("personal"))

    def overdue_tasks(self, now: datetime | None = None) -> list[WorkTask]:
        """Work tasks whose deadline has passed while still open."""
        return [task for task in self.work_tasks if task.is_overdue(now)]

    def get_tasks_by_priority(self) -> list[Task]:
        """All tasks ordered by descending priority.

        Ties keep their insertion order; internal order is left untouched.
        """
        return sorted(self._tasks.values(), key=lambda task: task.priority, reverse=True)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self.all_tasks)
