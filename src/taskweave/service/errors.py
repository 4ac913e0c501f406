# SPDX-License-Identifier: MIT

from taskweave.model.task import Task


class TaskError(Exception):
    """Base class for refused task operations."""

    pass


class TaskValidationError(TaskError):
    """Raised when a create or update would break a task invariant."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class CompletionBlockedError(TaskError):
    """Raised when a task is completed before its dependencies."""

    def __init__(self, blocked_by: list[Task]) -> None:
        titles = ", ".join(f'"{task["title"]}"' for task in blocked_by)
        super().__init__(f"Task is blocked by incomplete dependencies: {titles}")
        self.blocked_by = blocked_by


class DeletionBlockedError(TaskError):
    """Raised when a task that other tasks depend on is deleted."""

    def __init__(self, dependents: list[Task]) -> None:
        titles = ", ".join(f'"{task["title"]}"' for task in dependents)
        super().__init__(f"Cannot delete task because it's a dependency for: {titles}")
        self.dependents = dependents
