# SPDX-License-Identifier: MIT

from __future__ import annotations

import pendulum
import pytest

from taskweave.model.filter import CompletionFilter, SortDirection, SortField
from taskweave.model.task import Priority, Recurrence
from taskweave.service.search import search_tasks
from taskweave.template.filter import get_task_filter_template


def _ids(tasks) -> list:
    return [task["id"] for task in tasks]


def _sort(field: SortField, direction: SortDirection) -> dict:
    return {"field": field, "direction": direction}


def test_search_term_matches_title_or_description(make_task) -> None:
    tasks = [
        make_task("a", "Buy MILK"),
        make_task("b", "Other", description="remember the milk"),
        make_task("c", "Unrelated"),
    ]
    task_filter = get_task_filter_template()
    task_filter["search_term"] = "milk"
    result = search_tasks(tasks, task_filter, _sort(SortField.CREATED_AT, SortDirection.ASC))
    assert _ids(result) == ["a", "b"]


def test_empty_priorities_equal_no_filter(make_task) -> None:
    tasks = [
        make_task("a", priority=Priority.LOW),
        make_task("b", priority=Priority.HIGH),
    ]
    sort = _sort(SortField.CREATED_AT, SortDirection.ASC)
    task_filter = get_task_filter_template()
    assert _ids(search_tasks(tasks, task_filter, sort)) == ["a", "b"]

    task_filter["priorities"] = list(Priority)
    assert _ids(search_tasks(tasks, task_filter, sort)) == ["a", "b"]

    task_filter["priorities"] = [Priority.HIGH]
    assert _ids(search_tasks(tasks, task_filter, sort)) == ["b"]


def test_completion_filter(make_task) -> None:
    tasks = [make_task("a", completed=True), make_task("b")]
    sort = _sort(SortField.CREATED_AT, SortDirection.ASC)
    task_filter = get_task_filter_template()

    task_filter["show_completed"] = CompletionFilter.ALL
    assert _ids(search_tasks(tasks, task_filter, sort)) == ["a", "b"]
    task_filter["show_completed"] = CompletionFilter.INCOMPLETE
    assert _ids(search_tasks(tasks, task_filter, sort)) == ["b"]
    task_filter["show_completed"] = CompletionFilter.COMPLETED
    assert _ids(search_tasks(tasks, task_filter, sort)) == ["a"]


def test_completion_filter_from_legacy_toggle() -> None:
    assert CompletionFilter.from_legacy(None) == CompletionFilter.ALL
    assert CompletionFilter.from_legacy(True) == CompletionFilter.ALL
    assert CompletionFilter.from_legacy(False) == CompletionFilter.INCOMPLETE


def test_recurrence_filter(make_task) -> None:
    tasks = [make_task("a", recurrence=Recurrence.DAILY), make_task("b")]
    task_filter = get_task_filter_template()
    task_filter["recurrence"] = Recurrence.DAILY
    assert _ids(search_tasks(tasks, task_filter)) == ["a"]


def test_priority_descending(make_task) -> None:
    tasks = [
        make_task("low", priority=Priority.LOW),
        make_task("high", priority=Priority.HIGH),
        make_task("medium", priority=Priority.MEDIUM),
    ]
    result = search_tasks(tasks, None, _sort(SortField.PRIORITY, SortDirection.DESC))
    assert _ids(result) == ["high", "medium", "low"]


def test_due_date_none_last_in_both_directions(make_task) -> None:
    tasks = [
        make_task("none1"),
        make_task("late", due_date=pendulum.datetime(2024, 5, 1, tz="UTC")),
        make_task("none2"),
        make_task("early", due_date=pendulum.datetime(2024, 4, 1, tz="UTC")),
    ]
    asc = search_tasks(tasks, None, _sort(SortField.DUE_DATE, SortDirection.ASC))
    desc = search_tasks(tasks, None, _sort(SortField.DUE_DATE, SortDirection.DESC))
    assert _ids(asc) == ["early", "late", "none1", "none2"]
    assert _ids(desc) == ["late", "early", "none1", "none2"]


def test_sort_is_stable_for_ties(make_task) -> None:
    tasks = [make_task(str(i), priority=Priority.MEDIUM) for i in range(5)]
    for direction in SortDirection:
        result = search_tasks(tasks, None, _sort(SortField.PRIORITY, direction))
        assert _ids(result) == ["0", "1", "2", "3", "4"]


def test_default_sort_is_newest_first(make_task) -> None:
    tasks = [
        make_task("old", created_at=pendulum.datetime(2024, 1, 1, tz="UTC")),
        make_task("new", created_at=pendulum.datetime(2024, 2, 1, tz="UTC")),
    ]
    assert _ids(search_tasks(tasks)) == ["new", "old"]


def test_search_does_not_modify_input(make_task) -> None:
    tasks = [make_task("b", priority=Priority.LOW), make_task("a", priority=Priority.HIGH)]
    search_tasks(tasks, None, _sort(SortField.PRIORITY, SortDirection.DESC))
    assert _ids(tasks) == ["b", "a"]


@pytest.mark.parametrize(
    ("field", "direction", "expected"),
    [
        (SortField.COMPLETED, SortDirection.ASC, ["open", "done"]),
        (SortField.COMPLETED, SortDirection.DESC, ["done", "open"]),
        (SortField.PRIORITY, SortDirection.ASC, ["done", "open"]),
        (SortField.CREATED_AT, SortDirection.ASC, ["done", "open"]),
        (SortField.CREATED_AT, SortDirection.DESC, ["open", "done"]),
    ],
)
def test_sort_by_field_and_direction(make_task, field, direction, expected) -> None:
    tasks = [
        make_task(
            "done",
            completed=True,
            priority=Priority.LOW,
            created_at=pendulum.datetime(2024, 1, 1, tz="UTC"),
        ),
        make_task(
            "open",
            priority=Priority.HIGH,
            created_at=pendulum.datetime(2024, 2, 1, tz="UTC"),
        ),
    ]
    assert _ids(search_tasks(tasks, None, _sort(field, direction))) == expected


def test_priority_ascending_puts_low_first(make_task) -> None:
    tasks = [
        make_task("medium", priority=Priority.MEDIUM),
        make_task("high", priority=Priority.HIGH),
        make_task("low", priority=Priority.LOW),
    ]
    result = search_tasks(tasks, None, _sort(SortField.PRIORITY, SortDirection.ASC))
    assert _ids(result) == ["low", "medium", "high"]
