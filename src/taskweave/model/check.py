# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from taskweave.model.task import Task


class DependencyValidation(TypedDict):
    valid: bool
    reason: Optional[str]


class CompletionCheck(TypedDict):
    can_complete: bool
    blocked_by: list[Task]


class DeletionCheck(TypedDict):
    can_delete: bool
    dependents: list[Task]


class RolloverReport(TypedDict):
    created: list[Task]
    skipped: int
    failed: int
    cancelled: bool
