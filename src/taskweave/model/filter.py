# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import NotRequired, Optional, TypedDict

from taskweave.model.task import Priority, Recurrence


class CompletionFilter(StrEnum):
    ALL = "all"
    INCOMPLETE = "incomplete"
    COMPLETED = "completed"

    @classmethod
    def from_legacy(cls, show_completed: Optional[bool]) -> "CompletionFilter":
        """
        Map the old boolean-or-unset toggle onto the enumeration.

        Unset and True both mean "show everything"; False hides completed tasks.
        """
        if show_completed is False:
            return cls.INCOMPLETE
        return cls.ALL


class SortField(StrEnum):
    PRIORITY = "priority"
    DUE_DATE = "due_date"
    CREATED_AT = "created_at"
    COMPLETED = "completed"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


class TaskFilter(TypedDict):
    search_term: str
    priorities: list[Priority]
    show_completed: CompletionFilter
    recurrence: NotRequired[Optional[Recurrence]]


class TaskSort(TypedDict):
    field: SortField
    direction: SortDirection
