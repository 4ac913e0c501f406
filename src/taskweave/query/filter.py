# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional

from taskweave.model.filter import CompletionFilter, TaskFilter
from taskweave.model.task import Priority, Recurrence, Task


def generate_filter(task_filter: TaskFilter) -> "Predicate":
    """Build one predicate that ANDs every restriction in ``task_filter``."""
    predicate = And()
    predicate.add_predicate(SearchTerm(task_filter["search_term"]))
    predicate.add_predicate(PriorityIn(task_filter["priorities"]))
    predicate.add_predicate(Completion(task_filter["show_completed"]))
    predicate.add_predicate(RecurrenceIs(task_filter.get("recurrence")))
    return predicate


class Predicate(ABC):
    @abstractmethod
    def include(self, task: Task) -> bool: ...

    def filter(self, tasks: list[Task]) -> list[Task]:
        return [task for task in tasks if self.include(task)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, task: Task) -> bool:
        return all(predicate.include(task) for predicate in self.predicates)


class SearchTerm(Predicate):
    def __init__(self, search_term: str) -> None:
        self.search_term = search_term.lower()

    def include(self, task: Task) -> bool:
        if not self.search_term:
            return True
        if self.search_term in task["title"].lower():
            return True
        description = task["description"]
        return description is not None and self.search_term in description.lower()


class PriorityIn(Predicate):
    def __init__(self, priorities: list[Priority]) -> None:
        self.priorities = set(priorities)

    def include(self, task: Task) -> bool:
        # An empty selection means no restriction
        if len(self.priorities) == 0:
            return True
        return task["priority"] in self.priorities


class Completion(Predicate):
    def __init__(self, show_completed: CompletionFilter) -> None:
        self.show_completed = show_completed

    def include(self, task: Task) -> bool:
        match self.show_completed:
            case CompletionFilter.INCOMPLETE:
                return not task["completed"]
            case CompletionFilter.COMPLETED:
                return task["completed"]
        return True


class RecurrenceIs(Predicate):
    def __init__(self, recurrence: Optional[Recurrence]) -> None:
        self.recurrence = recurrence

    def include(self, task: Task) -> bool:
        if self.recurrence is None:
            return True
        return task["recurrence"] == self.recurrence
