# SPDX-License-Identifier: MIT

import json
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taskweave.color import (
    BLOCKED_TASK_COLOR,
    COMPLETED_TASK_COLOR,
    ERROR_COLOR,
    PRIORITY_COLORS,
)
from taskweave.model.check import RolloverReport
from taskweave.model.task import Recurrence, Task
from taskweave.repository.id_map import ID_MAP_REPO
from taskweave.serialize import task_to_api_dict
from taskweave.service.graph import TaskGraph
from taskweave.time import (
    datetime_to_display_local_date_str_optional,
    datetime_to_display_local_datetime_str,
)
from taskweave.view.header import header

console = Console()


def task_state(task: Task, graph: Optional[TaskGraph] = None) -> str:
    """
    State symbol: "X" completed, "!" waiting on incomplete dependencies,
    " " open.
    """
    if task["completed"]:
        return "X"
    if graph is not None and task["id"] is not None:
        if any(not dep["completed"] for dep in graph.transitive_dependencies(task["id"])):
            return "!"
    return " "


def short_id(task: Task) -> str:
    if task["id"] is None:
        return ""
    return str(ID_MAP_REPO.associate_id(task["id"]))


def format_dependencies(task: Task) -> str:
    return ", ".join(
        str(ID_MAP_REPO.associate_id(dep_id)) for dep_id in task["depends_on"]
    )


def tasks_view(
    report_name: str,
    tasks: list[Task],
    all_tasks: Optional[list[Task]] = None,
    columns: list[str] = [
        "id",
        "state",
        "priority",
        "due",
        "recurrence",
        "depends_on",
        "title",
    ],
    use_color: bool = True,
) -> None:
    header(report_name)

    graph = TaskGraph(all_tasks if all_tasks is not None else tasks)

    tasks_table = Table(box=box.SIMPLE)
    for column in columns:
        tasks_table.add_column(column)

    for task in tasks:
        state = task_state(task, graph)
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = short_id(task)
            elif column == "state":
                column_value = state
            elif column == "priority":
                column_value = str(task["priority"])
                if use_color and not task["completed"]:
                    color = PRIORITY_COLORS[task["priority"]]
                    column_value = f"[{color}]{column_value}[/{color}]"
            elif column == "due":
                column_value = (
                    datetime_to_display_local_date_str_optional(task["due_date"]) or ""
                )
            elif column == "recurrence":
                if task["recurrence"] != Recurrence.NONE:
                    column_value = str(task["recurrence"])
            elif column == "depends_on":
                column_value = format_dependencies(task)
            elif column == "title":
                column_value = escape(task["title"])
            elif column == "description":
                column_value = escape(task["description"] or "")

            if use_color:
                if task["completed"]:
                    column_value = f"[{COMPLETED_TASK_COLOR}]{column_value}[/{COMPLETED_TASK_COLOR}]"
                elif state == "!" and column == "state":
                    column_value = f"[{BLOCKED_TASK_COLOR}]{column_value}[/{BLOCKED_TASK_COLOR}]"

            row.append(column_value)
        tasks_table.add_row(*row)

    console.print(tasks_table)


def single_task_view(task: Task) -> None:
    header("task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", short_id(task))
    task_table.add_row("uuid", task["id"] or "")
    task_table.add_row("title", escape(task["title"]))
    task_table.add_row("description", escape(task["description"] or ""))
    task_table.add_row("completed", "yes" if task["completed"] else "no")
    task_table.add_row("priority", str(task["priority"]))
    task_table.add_row("recurrence", str(task["recurrence"]))
    task_table.add_row(
        "due", datetime_to_display_local_date_str_optional(task["due_date"]) or ""
    )
    task_table.add_row("depends_on", format_dependencies(task))
    task_table.add_row("created", datetime_to_display_local_datetime_str(task["created_at"]))
    task_table.add_row("updated", datetime_to_display_local_datetime_str(task["updated_at"]))

    console.print(task_table)


def blocking_tasks_view(message: str, tasks: list[Task]) -> None:
    """Print a refusal and the tasks responsible for it."""
    console.print(f"[{ERROR_COLOR}]{escape(message)}[/{ERROR_COLOR}]")
    tasks_view("blocking", tasks, columns=["id", "state", "priority", "title"])


def rollover_report_view(report: RolloverReport) -> None:
    header("recurrence")
    if len(report["created"]) > 0:
        tasks_view("created", report["created"])
    console.print(
        f"created: {len(report['created'])}  skipped: {report['skipped']}  failed: {report['failed']}"
    )


def tasks_json_view(tasks: list[Task]) -> None:
    console.print_json(json.dumps([task_to_api_dict(task) for task in tasks]))


def task_json_view(task: Task) -> None:
    console.print_json(json.dumps(task_to_api_dict(task)))
