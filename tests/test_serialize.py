# SPDX-License-Identifier: MIT

from __future__ import annotations

import pendulum
import pytest

from taskweave.model.task import Priority, Recurrence
from taskweave.serialize import task_from_serializable, task_to_api_dict


def test_api_dict_uses_camel_case_and_omits_unset(make_task) -> None:
    task = make_task("a", "A", depends_on=["b"], priority=Priority.HIGH)

    api_task = task_to_api_dict(task)

    assert api_task == {
        "id": "a",
        "title": "A",
        "completed": False,
        "priority": "high",
        "recurrence": "none",
        "dependsOn": ["b"],
        "createdAt": "2024-03-15T12:00:00+00:00",
        "updatedAt": "2024-03-15T12:00:00+00:00",
    }


def test_api_dict_includes_optional_fields_when_set(make_task) -> None:
    task = make_task(
        "a",
        description="details",
        recurrence=Recurrence.DAILY,
        due_date=pendulum.datetime(2024, 4, 1, tz="UTC"),
    )

    api_task = task_to_api_dict(task)

    assert api_task["description"] == "details"
    assert api_task["dueDate"] == "2024-04-01T00:00:00+00:00"
    assert api_task["recurrence"] == "daily"


def test_from_serializable_fills_defaults_and_converts_to_utc() -> None:
    task = task_from_serializable(
        {
            "id": "a",
            "title": "A",
            "created_at": "2024-01-01T10:00:00+02:00",
            "updated_at": "2024-01-01T10:00:00+02:00",
        }
    )

    assert task["priority"] == Priority.MEDIUM
    assert task["recurrence"] == Recurrence.NONE
    assert task["completed"] is False
    assert task["depends_on"] == []
    assert task["due_date"] is None
    assert task["created_at"] == pendulum.datetime(2024, 1, 1, 8, 0, tz="UTC")
    assert task["created_at"].timezone_name == "UTC"


def test_from_serializable_rejects_unknown_priority() -> None:
    with pytest.raises(ValueError):
        task_from_serializable(
            {
                "id": "a",
                "title": "A",
                "priority": "urgent",
                "created_at": "2024-01-01T00:00:00+00:00",
                "updated_at": "2024-01-01T00:00:00+00:00",
            }
        )


def test_from_serializable_requires_title() -> None:
    with pytest.raises(KeyError):
        task_from_serializable(
            {
                "id": "a",
                "created_at": "2024-01-01T00:00:00+00:00",
                "updated_at": "2024-01-01T00:00:00+00:00",
            }
        )
