# SPDX-License-Identifier: MIT

from taskweave.model.check import CompletionCheck
from taskweave.model.entity_id import EntityId
from taskweave.model.task import Task
from taskweave.service.graph import TaskGraph


def get_dependency_chain(graph: TaskGraph, task_id: EntityId) -> list[Task]:
    return graph.transitive_dependencies(task_id)


def can_complete(graph: TaskGraph, task_id: EntityId) -> CompletionCheck:
    """A task may be completed once its whole dependency chain is completed."""
    blocked_by = [
        task for task in get_dependency_chain(graph, task_id) if not task["completed"]
    ]
    return {"can_complete": len(blocked_by) == 0, "blocked_by": blocked_by}
