# SPDX-License-Identifier: MIT

from taskweave.model.check import DependencyValidation
from taskweave.model.entity_id import EntityId
from taskweave.service.graph import TaskGraph

CIRCULAR_DEPENDENCY_REASON = "Circular dependency detected"


def missing_dependency_reason(dependency_id: EntityId) -> str:
    return f"Dependency task with ID {dependency_id} does not exist"


def validate_dependencies(
    graph: TaskGraph, task_id: EntityId, proposed_depends_on: list[EntityId]
) -> DependencyValidation:
    """
    Decide whether ``task_id`` may depend on ``proposed_depends_on``.

    The walk starts at the proposed ids and follows each visited task's own
    dependencies; reaching ``task_id`` means the new edges would close a
    cycle (a task listing itself is the shortest one). Only after the walk
    finishes are the listed ids checked for existence, in input order, so a
    cycle is reported ahead of a missing id.

    Args:
        graph: Snapshot of the current store
        task_id: Task being updated, or UNSET_ENTITY_ID for a new task
        proposed_depends_on: Candidate dependency ids

    Returns:
        A DependencyValidation; the caller must refuse the write when
        ``valid`` is False.
    """
    if graph.reaches(proposed_depends_on, task_id):
        return {"valid": False, "reason": CIRCULAR_DEPENDENCY_REASON}

    for dependency_id in proposed_depends_on:
        if dependency_id not in graph:
            return {"valid": False, "reason": missing_dependency_reason(dependency_id)}

    return {"valid": True, "reason": None}
