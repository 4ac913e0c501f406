# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from taskweave.model.filter import (
    CompletionFilter,
    SortDirection,
    SortField,
    TaskFilter,
    TaskSort,
)
from taskweave.model.task import Priority, Recurrence
from taskweave.repository.configuration import CONFIGURATION_REPO
from taskweave.state import get_task_service
from taskweave.template.filter import get_task_filter_template
from taskweave.view.task import tasks_json_view, tasks_view


def get_configured_task_sort(
    field: Optional[SortField] = None, direction: Optional[SortDirection] = None
) -> TaskSort:
    """Sort from the given options, falling back to the configured defaults."""
    config = CONFIGURATION_REPO.get_config()
    return {
        "field": field or SortField(config["default_sort_field"]),
        "direction": direction or SortDirection(config["default_sort_direction"]),
    }


def search(
    term: Annotated[
        str, typer.Argument(help="Case-insensitive match on title and description")
    ] = "",
    priority: Annotated[
        Optional[list[Priority]],
        typer.Option(
            "--priority",
            "-p",
            case_sensitive=False,
            help="Only these priorities (repeatable)",
        ),
    ] = None,
    completed: Annotated[
        CompletionFilter,
        typer.Option("--completed", "-c", case_sensitive=False),
    ] = CompletionFilter.ALL,
    recurrence: Annotated[
        Optional[Recurrence],
        typer.Option("--recurrence", "-r", case_sensitive=False),
    ] = None,
    sort: Annotated[
        Optional[SortField],
        typer.Option("--sort", case_sensitive=False, help="Defaults to the configured field"),
    ] = None,
    direction: Annotated[
        Optional[SortDirection],
        typer.Option("--direction", case_sensitive=False),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print as JSON")] = False,
) -> None:
    """Filter and sort tasks."""
    task_filter: TaskFilter = get_task_filter_template()
    task_filter["search_term"] = term
    task_filter["priorities"] = priority or []
    task_filter["show_completed"] = completed
    task_filter["recurrence"] = recurrence

    service = get_task_service()
    tasks = service.search(task_filter, get_configured_task_sort(sort, direction))

    if as_json:
        tasks_json_view(tasks)
    else:
        tasks_view("search", tasks, all_tasks=service.list_tasks())
