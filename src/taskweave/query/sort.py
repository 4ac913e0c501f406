# SPDX-License-Identifier: MIT

from functools import cmp_to_key
from typing import Any

from taskweave.model.filter import SortDirection, SortField, TaskSort
from taskweave.model.task import Priority, Task

PRIORITY_RANK: dict[Priority, int] = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
}


def __compare(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def sort_tasks(tasks: list[Task], task_sort: TaskSort) -> list[Task]:
    """
    Stable sort of ``tasks`` by one field.

    The direction multiplies the comparison, so ties keep their incoming
    order either way. Tasks without a due date go last in both directions.
    """
    field = task_sort["field"]
    multiplier = -1 if task_sort["direction"] == SortDirection.DESC else 1

    if field == SortField.DUE_DATE:
        none_tasks = [task for task in tasks if task["due_date"] is None]
        value_tasks = [task for task in tasks if task["due_date"] is not None]
        value_tasks.sort(
            key=cmp_to_key(
                lambda left, right: multiplier
                * __compare(left["due_date"], right["due_date"])
            )
        )
        return value_tasks + none_tasks

    def sort_value(task: Task) -> Any:
        match field:
            case SortField.PRIORITY:
                return PRIORITY_RANK[task["priority"]]
            case SortField.COMPLETED:
                return int(task["completed"])
        return task["created_at"]

    return sorted(
        tasks,
        key=cmp_to_key(
            lambda left, right: multiplier
            * __compare(sort_value(left), sort_value(right))
        ),
    )
