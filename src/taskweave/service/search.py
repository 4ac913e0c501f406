# SPDX-License-Identifier: MIT

from typing import Optional

from taskweave.model.filter import TaskFilter, TaskSort
from taskweave.model.task import Task
from taskweave.query.filter import generate_filter
from taskweave.query.sort import sort_tasks
from taskweave.template.filter import get_task_filter_template, get_task_sort_template


def search_tasks(
    tasks: list[Task],
    task_filter: Optional[TaskFilter] = None,
    task_sort: Optional[TaskSort] = None,
) -> list[Task]:
    """
    Filter then sort ``tasks``.

    Args:
        tasks: Tasks in store order; ties in the sort keep this order
        task_filter: Restrictions to AND together, everything when None
        task_sort: Ordering, newest first by creation when None

    Returns:
        A new list; the input is not modified
    """
    if task_filter is None:
        task_filter = get_task_filter_template()
    if task_sort is None:
        task_sort = get_task_sort_template()

    filtered_tasks = generate_filter(task_filter).filter(tasks)
    return sort_tasks(filtered_tasks, task_sort)
