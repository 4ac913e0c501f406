# SPDX-License-Identifier: MIT

import typer

from taskweave.color import ERROR_COLOR
from taskweave.service.recurrence import is_recurring, next_due_date
from taskweave.state import get_task_service
from taskweave.terminal.custom_typer import AliasedTyperGroup
from taskweave.terminal.parse import parse_task_id
from taskweave.time import datetime_to_display_local_date_str_optional
from taskweave.view.task import console, rollover_report_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("run, r")
def run() -> None:
    """Create the next occurrence of every recurring task that is due."""
    report = get_task_service().handle_recurring_tasks()
    rollover_report_view(report)
    if report["failed"] > 0:
        raise typer.Exit(1)


@app.command("next, n", no_args_is_help=True)
def next_occurrence(id: str) -> None:
    """Show when the next occurrence of a task would be due."""
    real_id = parse_task_id(id)
    task = get_task_service().get_task(real_id)
    if task is None:
        console.print(f"[{ERROR_COLOR}]Task not found: {real_id}[/{ERROR_COLOR}]")
        raise typer.Exit(1)

    if not is_recurring(task):
        console.print("Task does not recur or has no due date")
        return

    next_due = next_due_date(task["due_date"], task["recurrence"])  # type: ignore[arg-type]
    console.print(datetime_to_display_local_date_str_optional(next_due) or "")
