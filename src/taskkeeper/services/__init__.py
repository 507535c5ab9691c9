"""Service layer for taskkeeper."""

from .task_manager import TaskManager

__all__ = ["TaskManager"]
