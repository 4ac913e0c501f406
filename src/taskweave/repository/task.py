# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskweave.model.entity_id import EntityId, generate_entity_id
from taskweave.model.task import Task, TaskUpdate
from taskweave.serialize import task_from_serializable, task_to_serializable
from taskweave.time import Clock, now_utc

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    Tasks stored as one YAML file per task inside ``tasks_dir``.

    The directory is read lazily on first access and kept in memory.
    Writes only mark entities dirty; nothing touches the disk until
    ``flush()``.
    """

    def __init__(self, tasks_dir: Path, clock: Clock = now_utc) -> None:
        self._tasks_dir = tasks_dir
        self._clock = clock
        self._tasks: Optional[list[Task]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        if not self._tasks_dir.is_dir():
            return
        for file_path in sorted(self._tasks_dir.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_task = load(file_path.read_text(), Loader=Loader)
            if raw_task is None:
                continue
            if not isinstance(raw_task, dict):
                raise ValueError(f"Malformed task file: {file_path}")
            self._tasks.append(task_from_serializable(raw_task))
        # Store order is creation order, independent of file names
        self._tasks.sort(key=lambda task: task["created_at"])
        logger.debug("Loaded %d task(s) from %s", len(self._tasks), self._tasks_dir)

    def __save_data(self) -> None:
        self._tasks_dir.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for task in self.tasks:
            if task["id"] in self._dirty_ids:
                file_path = self._tasks_dir / f"{task['id']}.yaml"
                file_path.write_text(dump(task_to_serializable(task), Dumper=Dumper))

        # Remove deleted entity files
        for entity_id in self._deleted_ids:
            file_path = self._tasks_dir / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        logger.debug(
            "Flushed %d task(s), removed %d",
            len(self._dirty_ids),
            len(self._deleted_ids),
        )
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __find(self, id: EntityId) -> Optional[Task]:
        for task in self.tasks:
            if task["id"] == id:
                return task
        return None

    def save_new_task(self, task: Task) -> EntityId:
        self.is_dirty = True

        task = deepcopy(task)
        task["id"] = generate_entity_id()
        # Deduplicate dependencies
        task["depends_on"] = list(dict.fromkeys(task["depends_on"]))

        self.tasks.append(task)
        self._dirty_ids.add(task["id"])

        return task["id"]

    def modify_task(self, id: EntityId, updates: TaskUpdate) -> Optional[Task]:
        task = self.__find(id)
        if task is None:
            return None

        self.is_dirty = True
        self._dirty_ids.add(id)

        # Set updated timestamp to current moment
        task["updated_at"] = self._clock()
        if "title" in updates:
            task["title"] = updates["title"]
        if "description" in updates:
            task["description"] = updates["description"]
        if "completed" in updates:
            task["completed"] = updates["completed"]
        if "priority" in updates:
            task["priority"] = updates["priority"]
        if "recurrence" in updates:
            task["recurrence"] = updates["recurrence"]
        if "due_date" in updates:
            task["due_date"] = updates["due_date"]
        if "depends_on" in updates:
            task["depends_on"] = list(dict.fromkeys(updates["depends_on"]))

        return deepcopy(task)

    def delete_task(self, id: EntityId) -> bool:
        task = self.__find(id)
        if task is None:
            return False

        self.is_dirty = True
        self.tasks.remove(task)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)
        return True

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, id: EntityId) -> Optional[Task]:
        task = self.__find(id)
        return deepcopy(task) if task is not None else None

    def get_direct_dependents(self, id: EntityId) -> list[Task]:
        return deepcopy([task for task in self.tasks if id in task["depends_on"]])
