# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum

from taskweave.model.entity_id import EntityId


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Recurrence(StrEnum):
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class Task(TypedDict):
    id: Optional[EntityId]
    title: str
    description: Optional[str]
    completed: bool
    priority: Priority
    recurrence: Recurrence
    due_date: Optional[pendulum.DateTime]
    depends_on: list[EntityId]
    created_at: pendulum.DateTime
    updated_at: pendulum.DateTime


class TaskUpdate(TypedDict, total=False):
    """
    Partial set of task fields for a modification.

    A key that is absent leaves the field alone. For the optional fields
    (description, due_date) a present key with a None value clears it.
    """

    title: str
    description: Optional[str]
    completed: bool
    priority: Priority
    recurrence: Recurrence
    due_date: Optional[pendulum.DateTime]
    depends_on: list[EntityId]
