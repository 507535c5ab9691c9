"""Task data models.

Every task carries the common fields defined on :class:`BaseTask` plus a
``kind`` tag naming its variant. The tag is the discriminator of the
:data:`Task` union, so consumers switch on ``task.kind`` rather than on the
concrete class.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

TaskKind = Literal["generic", "work", "personal"]

DEFAULT_CATEGORY = "General"


class BaseTask(BaseModel):
    """Fields and behaviour shared by every task variant.

    Attributes:
        id: Identifier assigned by the task manager, immutable
        title: Short description of the task
        is_completed: Completion status
        priority: Priority level (higher is more urgent, no fixed range)
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: int = Field(frozen=True)
    title: str
    is_completed: bool = False
    priority: int = 1

    def complete(self) -> None:
        """Mark the task as completed."""
        self.is_completed = True

    def uncomplete(self) -> None:
        """Mark the task as not completed."""
        self.is_completed = False

    def toggle_completion(self) -> None:
        self.is_completed = not self.is_completed

    def copy_with(self, **overrides: Any) -> BaseTask:
        """Return a new task of the same variant with some fields replaced.

        Variant-specific fields are carried over. Unknown field names and
        attempts to change ``kind`` fail validation.
        """
        data = self.model_dump()
        data.update(overrides)
        return type(self).model_validate(data)

    def as_generic(self) -> GenericTask:
        """Return a generic task holding only the common fields."""
        return GenericTask(
            id=self.id,
            title=self.title,
            is_completed=self.is_completed,
            priority=self.priority,
        )

    def summary(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.model_dump().items())
        return f"{type(self).__name__}({fields})"

    def __str__(self) -> str:
        return self.summary()


class GenericTask(BaseTask):
    """Task with no variant-specific fields."""

    kind: Literal["generic"] = Field(default="generic", frozen=True)


class WorkTask(BaseTask):
    """Work-related task.

    Attributes:
        project: Name of the project the task belongs to
        deadline: Optional point in time the task is due by
    """

    kind: Literal["work"] = Field(default="work", frozen=True)
    project: str
    deadline: datetime | None = None

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Whether the deadline has passed and the task is still open.

        Args:
            now: Reference time; defaults to the current time, in the
                deadline's timezone when the deadline is timezone-aware.
                Naive and aware values may be mixed; naive ones are
                read as local time

        Returns:
            False when there is no deadline or the task is completed
        """
        if self.deadline is None or self.is_completed:
            return False
        deadline = self.deadline
        if now is None:
            now = datetime.now(deadline.tzinfo)
        if (deadline.tzinfo is None) != (now.tzinfo is None):
            # naive values are taken as local time
            deadline, now = deadline.astimezone(), now.astimezone()
        return deadline < now


class PersonalTask(BaseTask):
    """Personal task.

    Attributes:
        location: Optional place where the task needs to be done
        category: Free-form grouping, "General" by default
    """

    kind: Literal["personal"] = Field(default="personal", frozen=True)
    location: str | None = None
    category: str = DEFAULT_CATEGORY


Task = Annotated[
    Union[GenericTask, WorkTask, PersonalTask],
    Field(discriminator="kind"),
]

task_adapter: TypeAdapter[Task] = TypeAdapter(Task)


def parse_task(data: dict[str, Any]) -> Task:
    """Build the right task variant from a plain mapping using its ``kind``."""
    return task_adapter.validate_python(data)
