# SPDX-License-Identifier: MIT

"""
Storage port used by the task service.

The service depends on this Protocol instead of a concrete store, so the YAML
repository and the in-memory fake used by the tests are interchangeable.
"""

from typing import Optional, Protocol

from taskweave.model.entity_id import EntityId
from taskweave.model.task import Task, TaskUpdate


class TaskRepo(Protocol):
    def get_all_tasks(self) -> list[Task]: ...

    def get_task(self, id: EntityId) -> Optional[Task]: ...

    def get_direct_dependents(self, id: EntityId) -> list[Task]:
        """
        Tasks listing ``id`` in their ``depends_on``.

        Lookup for callers outside the service. The service's deletion
        guard reads the same edges from its own graph snapshot instead.
        """
        ...

    def save_new_task(self, task: Task) -> EntityId: ...

    def modify_task(self, id: EntityId, updates: TaskUpdate) -> Optional[Task]: ...

    def delete_task(self, id: EntityId) -> bool: ...

    def flush(self) -> bool: ...
