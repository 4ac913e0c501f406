# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.markup import escape

from taskweave.color import ERROR_COLOR, SUCCESS_COLOR
from taskweave.configuration import DeletionPolicy
from taskweave.model.entity_id import EntityId
from taskweave.model.task import Priority, Recurrence, Task, TaskUpdate
from taskweave.repository.id_map import ID_MAP_REPO
from taskweave.service.errors import (
    CompletionBlockedError,
    DeletionBlockedError,
    TaskValidationError,
)
from taskweave.state import get_task_service
from taskweave.terminal.custom_typer import AliasedTyperGroup
from taskweave.terminal.parse import parse_datetime, parse_task_id, parse_task_id_list
from taskweave.terminal.search import get_configured_task_sort
from taskweave.view.task import (
    blocking_tasks_view,
    console,
    single_task_view,
    task_json_view,
    tasks_json_view,
    tasks_view,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATETIME_HELP = "valid inputs: YYYY-MM-DD, YYYY-MM-DD HH:mm, now, today, yesterday, tomorrow, or day offset like 1, -1"


def __not_found(id: EntityId) -> typer.Exit:
    console.print(f"[{ERROR_COLOR}]Task not found: {escape(id)}[/{ERROR_COLOR}]")
    return typer.Exit(1)


def __require_task(id: EntityId) -> Task:
    task = get_task_service().get_task(id)
    if task is None:
        raise __not_found(id)
    return task


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    priority: Annotated[
        Priority, typer.Option("--priority", "-pr", case_sensitive=False)
    ] = Priority.MEDIUM,
    recurrence: Annotated[
        Recurrence, typer.Option("--recurrence", "-r", case_sensitive=False)
    ] = Recurrence.NONE,
    due: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--due", "-u", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    depends_on: Annotated[
        Optional[list[str]],
        typer.Option(
            "--depends-on",
            "-dep",
            help="task id this task depends on (repeatable, or comma-separated)",
        ),
    ] = None,
) -> None:
    service = get_task_service()

    try:
        task = service.create_task(
            title,
            description=description,
            priority=priority,
            recurrence=recurrence,
            due_date=due,
            depends_on=parse_task_id_list(depends_on),
        )
    except TaskValidationError as e:
        console.print(f"[{ERROR_COLOR}]{escape(e.reason)}[/{ERROR_COLOR}]")
        raise typer.Exit(1)

    single_task_view(task)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
    priority: Annotated[
        Optional[Priority], typer.Option("--priority", "-pr", case_sensitive=False)
    ] = None,
    recurrence: Annotated[
        Optional[Recurrence], typer.Option("--recurrence", "-r", case_sensitive=False)
    ] = None,
    due: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--due", "-u", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    remove_due: Annotated[bool, typer.Option("--remove-due", "-ru")] = False,
    depends_on: Annotated[
        Optional[list[str]],
        typer.Option(
            "--depends-on",
            "-dep",
            help="replaces the dependency list (repeatable, or comma-separated)",
        ),
    ] = None,
    remove_depends_on: Annotated[
        bool, typer.Option("--remove-depends-on", "-rdep", help="Clear all dependencies")
    ] = False,
) -> None:
    real_id = parse_task_id(id)

    updates: TaskUpdate = {}
    if title is not None:
        updates["title"] = title
    if description is not None:
        updates["description"] = description
    if remove_description:
        updates["description"] = None
    if priority is not None:
        updates["priority"] = priority
    if recurrence is not None:
        updates["recurrence"] = recurrence
    if due is not None:
        updates["due_date"] = due
    if remove_due:
        updates["due_date"] = None
    parsed_depends_on = parse_task_id_list(depends_on)
    if parsed_depends_on is not None:
        updates["depends_on"] = parsed_depends_on
    if remove_depends_on:
        updates["depends_on"] = []

    try:
        task = get_task_service().update_task(real_id, updates)
    except TaskValidationError as e:
        console.print(f"[{ERROR_COLOR}]{escape(e.reason)}[/{ERROR_COLOR}]")
        raise typer.Exit(1)
    except CompletionBlockedError as e:
        blocking_tasks_view(str(e), e.blocked_by)
        raise typer.Exit(1)

    if task is None:
        raise __not_found(real_id)

    single_task_view(task)


@app.command("toggle, c", no_args_is_help=True)
def toggle(id: str) -> None:
    """
    Toggle completion. A task can only be completed once everything it
    depends on, directly or not, is completed.
    """
    real_id = parse_task_id(id)

    try:
        task = get_task_service().toggle_completion(real_id)
    except CompletionBlockedError as e:
        blocking_tasks_view(str(e), e.blocked_by)
        raise typer.Exit(1)

    if task is None:
        raise __not_found(real_id)

    single_task_view(task)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    cascade: Annotated[
        bool,
        typer.Option(
            "--cascade",
            help="Remove this task from its dependents instead of refusing",
        ),
    ] = False,
) -> None:
    real_id = parse_task_id(id)
    task = __require_task(real_id)

    try:
        deleted = get_task_service().delete_task(
            real_id, DeletionPolicy.CASCADE if cascade else None
        )
    except DeletionBlockedError as e:
        blocking_tasks_view(str(e), e.dependents)
        raise typer.Exit(1)

    if not deleted:
        raise __not_found(real_id)

    ID_MAP_REPO.forget(real_id)
    console.print(
        f"[{SUCCESS_COLOR}]Deleted task: {escape(task['title'])}[/{SUCCESS_COLOR}]",
        markup=True,
        highlight=False,
    )


@app.command("show, s", no_args_is_help=True)
def show(
    id: str,
    as_json: Annotated[bool, typer.Option("--json", help="Print as JSON")] = False,
) -> None:
    task = __require_task(parse_task_id(id))
    if as_json:
        task_json_view(task)
    else:
        single_task_view(task)


@app.command("list, l")
def list_tasks(
    as_json: Annotated[bool, typer.Option("--json", help="Print as JSON")] = False,
) -> None:
    tasks = get_task_service().search(None, get_configured_task_sort())
    if as_json:
        tasks_json_view(tasks)
    else:
        tasks_view("tasks", tasks)


@app.command("deps, dp", no_args_is_help=True)
def deps(id: str) -> None:
    """Show everything a task depends on, directly or not."""
    real_id = parse_task_id(id)
    __require_task(real_id)

    service = get_task_service()
    chain = service.get_dependency_chain(real_id)
    tasks_view("dependencies", chain, all_tasks=service.list_tasks())

    check = service.can_complete(real_id)
    if check["can_complete"]:
        console.print(f"[{SUCCESS_COLOR}]Ready to complete[/{SUCCESS_COLOR}]")
    else:
        console.print(
            f"[{ERROR_COLOR}]Blocked by {len(check['blocked_by'])} task(s)[/{ERROR_COLOR}]"
        )
