# SPDX-License-Identifier: MIT

from __future__ import annotations

from taskweave.service.completion import can_complete, get_dependency_chain
from taskweave.service.deletion import can_delete
from taskweave.service.graph import TaskGraph


def test_task_without_dependencies_can_complete(make_task) -> None:
    graph = TaskGraph([make_task("a")])
    assert can_complete(graph, "a") == {"can_complete": True, "blocked_by": []}


def test_incomplete_transitive_dependency_blocks(make_task) -> None:
    graph = TaskGraph(
        [
            make_task("a"),
            make_task("b", depends_on=["a"], completed=True),
            make_task("c", depends_on=["b"]),
        ]
    )
    result = can_complete(graph, "c")
    assert result["can_complete"] is False
    assert [task["id"] for task in result["blocked_by"]] == ["a"]


def test_all_dependencies_complete(make_task) -> None:
    graph = TaskGraph(
        [
            make_task("a", completed=True),
            make_task("b", depends_on=["a"], completed=True),
            make_task("c", depends_on=["b"]),
        ]
    )
    assert can_complete(graph, "c")["can_complete"] is True


def test_unknown_task_has_empty_chain(make_task) -> None:
    graph = TaskGraph([make_task("a")])
    assert get_dependency_chain(graph, "nope") == []
    assert can_complete(graph, "nope")["can_complete"] is True


def test_dependency_chain_lists_completed_tasks_too(make_task) -> None:
    graph = TaskGraph(
        [make_task("a", completed=True), make_task("b", depends_on=["a"])]
    )
    assert [task["id"] for task in get_dependency_chain(graph, "b")] == ["a"]


def test_deletion_blocked_by_direct_dependents_only(make_task) -> None:
    graph = TaskGraph(
        [
            make_task("a"),
            make_task("b", depends_on=["a"]),
            make_task("c", depends_on=["b"]),
        ]
    )
    result = can_delete(graph, "a")
    assert result["can_delete"] is False
    assert [task["id"] for task in result["dependents"]] == ["b"]
    assert can_delete(graph, "c") == {"can_delete": True, "dependents": []}
