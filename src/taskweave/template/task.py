# SPDX-License-Identifier: MIT

from taskweave.model.task import Priority, Recurrence, Task
from taskweave.time import Clock, now_utc


def get_task_template(clock: Clock = now_utc) -> Task:
    now = clock()
    return {
        "id": None,
        "title": "",
        "description": None,
        "completed": False,
        "priority": Priority.MEDIUM,
        "recurrence": Recurrence.NONE,
        "due_date": None,
        "depends_on": [],
        "created_at": now,
        "updated_at": now,
    }
