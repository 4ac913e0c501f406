# SPDX-License-Identifier: MIT

from typing import Any

from taskweave import time
from taskweave.model.task import Priority, Recurrence, Task


def task_to_serializable(task: Task) -> dict[str, Any]:
    """Plain-data form of a task, as written to its YAML file."""
    return {
        "id": task["id"],
        "title": task["title"],
        "description": task["description"],
        "completed": task["completed"],
        "priority": str(task["priority"]),
        "recurrence": str(task["recurrence"]),
        "due_date": time.datetime_to_iso_str_optional(task["due_date"]),
        "depends_on": list(task["depends_on"]),
        "created_at": time.datetime_to_iso_str(task["created_at"]),
        "updated_at": time.datetime_to_iso_str(task["updated_at"]),
    }


def task_from_serializable(raw_task: dict[str, Any]) -> Task:
    """
    Rebuild a task from its stored form.

    Malformed records raise ValueError (or KeyError for a missing field);
    they are not silently repaired.
    """
    depends_on = raw_task.get("depends_on") or []
    if not isinstance(depends_on, list):
        raise ValueError(
            f"Task {raw_task.get('id')}: depends_on must be a list, got {type(depends_on).__name__}"
        )
    title = raw_task["title"]
    if not isinstance(title, str):
        raise ValueError(f"Task {raw_task.get('id')}: title must be a string")

    return {
        "id": str(raw_task["id"]),
        "title": title,
        "description": raw_task.get("description"),
        "completed": bool(raw_task.get("completed", False)),
        "priority": Priority(raw_task.get("priority", Priority.MEDIUM)),
        "recurrence": Recurrence(raw_task.get("recurrence", Recurrence.NONE)),
        "due_date": time.datetime_from_str_optional(raw_task.get("due_date")),
        "depends_on": [str(dep_id) for dep_id in depends_on],
        "created_at": time.datetime_from_str(raw_task["created_at"]),
        "updated_at": time.datetime_from_str(raw_task["updated_at"]),
    }


def task_to_api_dict(task: Task) -> dict[str, Any]:
    """Task in the external camelCase shape with ISO-8601 timestamps."""
    api_task: dict[str, Any] = {
        "id": task["id"],
        "title": task["title"],
        "completed": task["completed"],
        "priority": str(task["priority"]),
        "recurrence": str(task["recurrence"]),
        "dependsOn": list(task["depends_on"]),
        "createdAt": time.datetime_to_iso_str(task["created_at"]),
        "updatedAt": time.datetime_to_iso_str(task["updated_at"]),
    }
    # Optional fields are omitted rather than sent as null
    if task["description"] is not None:
        api_task["description"] = task["description"]
    if task["due_date"] is not None:
        api_task["dueDate"] = time.datetime_to_iso_str(task["due_date"])
    return api_task
