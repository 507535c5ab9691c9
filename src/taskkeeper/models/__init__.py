"""taskkeeper domain models.

Pydantic models for the task variants and the application configuration.
"""

from .config_models import AppConfig, DemoConfig, OutputConfig
from .task import (
    DEFAULT_CATEGORY,
    BaseTask,
    GenericTask,
    PersonalTask,
    Task,
    TaskKind,
    WorkTask,
    parse_task,
)

__all__ = [
    # Task models
    "BaseTask",
    "GenericTask",
    "WorkTask",
    "PersonalTask",
    "Task",
    "TaskKind",
    "DEFAULT_CATEGORY",
    "parse_task",
    # Config models
    "AppConfig",
    "OutputConfig",
    "DemoConfig",
]
