# SPDX-License-Identifier: MIT

from taskweave.model.task import Priority

# Color constant for completed tasks
COMPLETED_TASK_COLOR = "bright_black"

# Color for tasks still waiting on incomplete dependencies
BLOCKED_TASK_COLOR = "dark_orange"

PRIORITY_COLORS: dict[Priority, str] = {
    Priority.LOW: "green",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "red",
}

ERROR_COLOR = "red"
SUCCESS_COLOR = "green"
