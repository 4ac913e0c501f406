# SPDX-License-Identifier: MIT

from typing import Iterable, Iterator, Optional

from taskweave.model.entity_id import EntityId
from taskweave.model.task import Task


class TaskGraph:
    """
    Dependency graph over one snapshot of the task store.

    Edges point from a task to the tasks listed in its ``depends_on``.
    Every walk in a single operation runs against the same snapshot.
    A later task with an id already seen replaces the earlier one.
    """

    def __init__(self, tasks: Iterable[Task]) -> None:
        self._tasks: dict[EntityId, Task] = {}
        for task in tasks:
            if task["id"] is not None:
                self._tasks[task["id"]] = task

    def __contains__(self, id: object) -> bool:
        return id in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, id: EntityId) -> Optional[Task]:
        return self._tasks.get(id)

    def dependencies_of(self, id: EntityId) -> list[EntityId]:
        task = self._tasks.get(id)
        if task is None:
            return []
        return task["depends_on"]

    def reaches(self, start_ids: Iterable[EntityId], target_id: EntityId) -> bool:
        """Whether ``target_id`` is reachable from any of ``start_ids``."""
        visited: set[EntityId] = set()
        stack: list[EntityId] = list(start_ids)

        while stack:
            current_id = stack.pop()
            if current_id == target_id:
                return True
            if current_id in visited:
                continue
            visited.add(current_id)
            stack.extend(self.dependencies_of(current_id))

        return False

    def transitive_dependencies(self, id: EntityId) -> list[Task]:
        """
        All tasks reachable from ``id`` through ``depends_on``.

        Depth-first, each dependency list in order, deduplicated by id.
        Ids that do not resolve to a task are skipped.
        """
        result: list[Task] = []
        seen: set[EntityId] = {id}
        # Stack of iterators keeps pre-order discovery without recursion
        stack: list[Iterator[EntityId]] = [iter(self.dependencies_of(id))]

        while stack:
            dependency_id = next(stack[-1], None)
            if dependency_id is None:
                stack.pop()
                continue
            if dependency_id in seen:
                continue
            seen.add(dependency_id)
            dependency = self._tasks.get(dependency_id)
            if dependency is None:
                continue
            result.append(dependency)
            stack.append(iter(dependency["depends_on"]))

        return result

    def direct_dependents(self, id: EntityId) -> list[Task]:
        return [task for task in self._tasks.values() if id in task["depends_on"]]
