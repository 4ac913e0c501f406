# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

import pendulum

from taskweave.model.task import Recurrence, Task
from taskweave.template.task import get_task_template
from taskweave.time import Clock


def next_due_date(
    current_due_date: pendulum.DateTime, recurrence: Recurrence
) -> Optional[pendulum.DateTime]:
    """
    Next occurrence of a recurring due date.

    The step is taken on the local calendar, where the user picked the
    date, and the result is returned in UTC. Months are calendar months
    and the day is clamped to the end of a shorter month: 2024-01-31
    monthly gives 2024-02-29.
    """
    local_due_date = current_due_date.in_tz("local")
    match recurrence:
        case Recurrence.DAILY:
            next_local_due_date = local_due_date.add(days=1)
        case Recurrence.WEEKLY:
            next_local_due_date = local_due_date.add(weeks=1)
        case Recurrence.MONTHLY:
            next_local_due_date = local_due_date.add(months=1)
        case _:
            return None
    return next_local_due_date.in_tz("UTC")


def is_recurring(task: Task) -> bool:
    return task["recurrence"] != Recurrence.NONE and task["due_date"] is not None


def build_rollover_task(task: Task, clock: Clock) -> Optional[Task]:
    """
    Next instance of ``task`` if its next due date has been reached.

    The returned task has no id yet. The source task is not touched.
    """
    if not is_recurring(task):
        return None

    due_date = next_due_date(
        task["due_date"],  # type: ignore[arg-type]
        task["recurrence"],
    )
    now = clock()
    if due_date is None or due_date > now:
        return None

    next_task = get_task_template(clock=lambda: now)
    next_task["title"] = task["title"]
    next_task["description"] = task["description"]
    next_task["priority"] = task["priority"]
    next_task["recurrence"] = task["recurrence"]
    next_task["depends_on"] = deepcopy(task["depends_on"])
    next_task["due_date"] = due_date
    return next_task
