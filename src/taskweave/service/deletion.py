# SPDX-License-Identifier: MIT

from taskweave.model.check import DeletionCheck
from taskweave.model.entity_id import EntityId
from taskweave.service.graph import TaskGraph


def can_delete(graph: TaskGraph, task_id: EntityId) -> DeletionCheck:
    # Only direct dependents hold an edge to this task
    dependents = graph.direct_dependents(task_id)
    return {"can_delete": len(dependents) == 0, "dependents": dependents}
