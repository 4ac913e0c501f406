# SPDX-License-Identifier: MIT

import logging
import threading
from typing import Callable, Optional

import pendulum

from taskweave.configuration import DeletionPolicy
from taskweave.model.check import (
    CompletionCheck,
    DeletionCheck,
    DependencyValidation,
    RolloverReport,
)
from taskweave.model.entity_id import UNSET_ENTITY_ID, EntityId
from taskweave.model.filter import TaskFilter, TaskSort
from taskweave.model.task import Priority, Recurrence, Task, TaskUpdate
from taskweave.repository.base import TaskRepo
from taskweave.service import completion, deletion, dependency
from taskweave.service.errors import (
    CompletionBlockedError,
    DeletionBlockedError,
    TaskValidationError,
)
from taskweave.service.graph import TaskGraph
from taskweave.service.recurrence import build_rollover_task, is_recurring
from taskweave.service.search import search_tasks
from taskweave.template.task import get_task_template
from taskweave.time import Clock, now_utc

logger = logging.getLogger(__name__)


class TaskService:
    """
    Task operations with the dependency rules enforced.

    Every check-then-write sequence runs under one re-entrant lock and
    against a single snapshot of the store, so a validation cannot be
    invalidated by another mutation from this process before it commits.

    Refused operations raise a TaskError subclass. Unknown ids are not
    errors: they give None (or False for delete).
    """

    def __init__(
        self,
        repository: TaskRepo,
        clock: Clock = now_utc,
        deletion_policy: DeletionPolicy = DeletionPolicy.BLOCK,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._deletion_policy = deletion_policy
        self._lock = threading.RLock()

    @property
    def repository(self) -> TaskRepo:
        return self._repository

    def __graph(self, *extra_tasks: Task) -> TaskGraph:
        return TaskGraph([*self._repository.get_all_tasks(), *extra_tasks])

    # ---- queries ----

    def list_tasks(self) -> list[Task]:
        return self._repository.get_all_tasks()

    def get_task(self, id: EntityId) -> Optional[Task]:
        return self._repository.get_task(id)

    def search(
        self,
        task_filter: Optional[TaskFilter] = None,
        task_sort: Optional[TaskSort] = None,
    ) -> list[Task]:
        return search_tasks(self._repository.get_all_tasks(), task_filter, task_sort)

    def validate_dependencies(
        self, task_id: EntityId, depends_on: list[EntityId]
    ) -> DependencyValidation:
        return dependency.validate_dependencies(self.__graph(), task_id, depends_on)

    def can_complete(self, task_id: EntityId) -> CompletionCheck:
        return completion.can_complete(self.__graph(), task_id)

    def get_dependency_chain(self, task_id: EntityId) -> list[Task]:
        return completion.get_dependency_chain(self.__graph(), task_id)

    def can_delete(self, task_id: EntityId) -> DeletionCheck:
        return deletion.can_delete(self.__graph(), task_id)

    # ---- mutations ----

    def create_task(
        self,
        title: str,
        description: Optional[str] = None,
        priority: Priority = Priority.MEDIUM,
        recurrence: Recurrence = Recurrence.NONE,
        due_date: Optional[pendulum.DateTime] = None,
        depends_on: Optional[list[EntityId]] = None,
        completed: bool = False,
    ) -> Task:
        title = self.__validate_title(title)

        task = get_task_template(self._clock)
        task["id"] = UNSET_ENTITY_ID
        task["title"] = title
        task["description"] = description
        task["priority"] = priority
        task["recurrence"] = recurrence
        task["due_date"] = due_date
        task["depends_on"] = list(dict.fromkeys(depends_on or []))
        task["completed"] = completed

        with self._lock:
            graph = self.__graph()
            self.__check_dependencies(graph, UNSET_ENTITY_ID, task["depends_on"])
            if completed:
                self.__check_can_complete(self.__graph(task), UNSET_ENTITY_ID)

            task["id"] = None
            id = self._repository.save_new_task(task)
            created = self._repository.get_task(id)

        if created is None:
            raise ValueError(f"Task {id} was not stored")
        logger.info("Created task %s: %s", id, title)
        return created

    def update_task(self, id: EntityId, updates: TaskUpdate) -> Optional[Task]:
        updates = TaskUpdate(**updates)
        if "title" in updates:
            updates["title"] = self.__validate_title(updates["title"])
        if "depends_on" in updates:
            updates["depends_on"] = list(dict.fromkeys(updates["depends_on"]))

        with self._lock:
            current = self._repository.get_task(id)
            if current is None:
                logger.info("Update of unknown task %s", id)
                return None

            graph = self.__graph()
            if "depends_on" in updates:
                self.__check_dependencies(graph, id, updates["depends_on"])

            if updates.get("completed") and not current["completed"]:
                if "depends_on" in updates:
                    # Gate against the dependencies being written
                    candidate = Task(**current)
                    candidate["depends_on"] = updates["depends_on"]
                    graph = self.__graph(candidate)
                self.__check_can_complete(graph, id)

            updated = self._repository.modify_task(id, updates)

        logger.info("Updated task %s (%s)", id, ", ".join(sorted(updates)))
        return updated

    def toggle_completion(self, id: EntityId) -> Optional[Task]:
        """
        Flip a task's completed flag.

        Completing goes through the completion gate; reopening never does.
        """
        with self._lock:
            current = self._repository.get_task(id)
            if current is None:
                return None

            if not current["completed"]:
                self.__check_can_complete(self.__graph(), id)

            updated = self._repository.modify_task(
                id, {"completed": not current["completed"]}
            )

        logger.info(
            "Task %s marked %s", id, "incomplete" if current["completed"] else "complete"
        )
        return updated

    def delete_task(
        self, id: EntityId, deletion_policy: Optional[DeletionPolicy] = None
    ) -> bool:
        """
        Delete a task.

        Under the block policy a task with direct dependents is refused.
        Under the cascade policy the task's id is first removed from each
        dependent's ``depends_on``.

        Returns:
            False if no task has this id
        """
        policy = deletion_policy or self._deletion_policy

        with self._lock:
            if self._repository.get_task(id) is None:
                return False

            check = deletion.can_delete(self.__graph(), id)
            if not check["can_delete"]:
                if policy == DeletionPolicy.BLOCK:
                    logger.info(
                        "Deletion of %s refused, %d dependent(s)",
                        id,
                        len(check["dependents"]),
                    )
                    raise DeletionBlockedError(check["dependents"])

                for dependent in check["dependents"]:
                    self._repository.modify_task(
                        dependent["id"],  # type: ignore[arg-type]
                        {
                            "depends_on": [
                                dep_id
                                for dep_id in dependent["depends_on"]
                                if dep_id != id
                            ]
                        },
                    )
                    logger.debug("Removed dependency %s from %s", id, dependent["id"])

            deleted = self._repository.delete_task(id)

        logger.info("Deleted task %s", id)
        return deleted

    # ---- recurrence ----

    def rollover(self, task: Task) -> Optional[Task]:
        """
        Create the next occurrence of ``task`` if it is due.

        The task is re-read first; if it disappeared in the meantime
        nothing is created.
        """
        if task["id"] is None:
            return None

        with self._lock:
            current = self._repository.get_task(task["id"])
            if current is None:
                logger.info("Recurring task %s disappeared, skipping", task["id"])
                return None

            next_task = build_rollover_task(current, self._clock)
            if next_task is None:
                return None

            graph = self.__graph()
            validation = dependency.validate_dependencies(
                graph, UNSET_ENTITY_ID, next_task["depends_on"]
            )
            if not validation["valid"]:
                raise TaskValidationError(validation["reason"] or "")

            id = self._repository.save_new_task(next_task)
            created = self._repository.get_task(id)

        logger.info(
            "Rolled over task %s into %s due %s",
            current["id"],
            id,
            next_task["due_date"],
        )
        return created

    def handle_recurring_tasks(
        self, should_stop: Optional[Callable[[], bool]] = None
    ) -> RolloverReport:
        """
        One rollover pass over every recurring task with a due date.

        Each task is handled on its own: a failure is logged and counted
        and the pass moves on. ``should_stop`` is polled before each task
        and ends the pass early when it returns True.
        """
        report: RolloverReport = {
            "created": [],
            "skipped": 0,
            "failed": 0,
            "cancelled": False,
        }
        recurring_tasks = [
            task for task in self._repository.get_all_tasks() if is_recurring(task)
        ]
        logger.info("Recurrence pass over %d task(s)", len(recurring_tasks))

        for task in recurring_tasks:
            if should_stop is not None and should_stop():
                logger.warning("Recurrence pass cancelled")
                report["cancelled"] = True
                break
            try:
                created = self.rollover(task)
            except Exception:
                logger.exception("Rollover failed for task %s", task["id"])
                report["failed"] += 1
                continue
            if created is None:
                report["skipped"] += 1
            else:
                report["created"].append(created)

        return report

    def flush(self) -> bool:
        with self._lock:
            return self._repository.flush()

    # ---- helpers ----

    @staticmethod
    def __validate_title(title: str) -> str:
        if title is None or not title.strip():
            raise TaskValidationError("Title is required")
        return title.strip()

    @staticmethod
    def __check_dependencies(
        graph: TaskGraph, task_id: EntityId, depends_on: list[EntityId]
    ) -> None:
        validation = dependency.validate_dependencies(graph, task_id, depends_on)
        if not validation["valid"]:
            logger.info("Dependencies refused for %s: %s", task_id, validation["reason"])
            raise TaskValidationError(validation["reason"] or "Invalid dependencies")

    @staticmethod
    def __check_can_complete(graph: TaskGraph, task_id: EntityId) -> None:
        check = completion.can_complete(graph, task_id)
        if not check["can_complete"]:
            logger.info(
                "Completion of %s refused, blocked by %d task(s)",
                task_id,
                len(check["blocked_by"]),
            )
            raise CompletionBlockedError(check["blocked_by"])
