# SPDX-License-Identifier: MIT

from __future__ import annotations

from taskweave.model.entity_id import UNSET_ENTITY_ID
from taskweave.service.dependency import (
    CIRCULAR_DEPENDENCY_REASON,
    missing_dependency_reason,
    validate_dependencies,
)
from taskweave.service.graph import TaskGraph


def test_empty_dependencies_are_valid(make_task) -> None:
    graph = TaskGraph([make_task("a")])
    assert validate_dependencies(graph, "a", []) == {"valid": True, "reason": None}


def test_existing_dependencies_are_valid(make_task) -> None:
    graph = TaskGraph([make_task("a"), make_task("b"), make_task("c")])
    result = validate_dependencies(graph, "c", ["a", "b"])
    assert result["valid"] is True
    assert result["reason"] is None


def test_self_dependency_is_a_cycle(make_task) -> None:
    graph = TaskGraph([make_task("a")])
    result = validate_dependencies(graph, "a", ["a"])
    assert result == {"valid": False, "reason": CIRCULAR_DEPENDENCY_REASON}


def test_cycle_through_existing_chain_is_rejected(make_task) -> None:
    # a -> b -> c; making c depend on a closes the loop
    graph = TaskGraph(
        [
            make_task("a", depends_on=["b"]),
            make_task("b", depends_on=["c"]),
            make_task("c"),
        ]
    )
    result = validate_dependencies(graph, "c", ["a"])
    assert result["valid"] is False
    assert result["reason"] == "Circular dependency detected"


def test_missing_dependency_reports_first_missing_in_input_order(make_task) -> None:
    graph = TaskGraph([make_task("a")])
    result = validate_dependencies(graph, UNSET_ENTITY_ID, ["a", "x", "y"])
    assert result == {"valid": False, "reason": missing_dependency_reason("x")}
    assert result["reason"] == "Dependency task with ID x does not exist"


def test_cycle_is_reported_before_missing(make_task) -> None:
    graph = TaskGraph([make_task("a", depends_on=["b"]), make_task("b")])
    result = validate_dependencies(graph, "b", ["missing", "a"])
    assert result["reason"] == CIRCULAR_DEPENDENCY_REASON


def test_new_task_cannot_form_a_cycle(make_task) -> None:
    graph = TaskGraph([make_task("a", depends_on=["b"]), make_task("b")])
    assert validate_dependencies(graph, UNSET_ENTITY_ID, ["a", "b"])["valid"] is True


def test_dangling_edges_in_store_do_not_break_the_walk(make_task) -> None:
    graph = TaskGraph([make_task("a", depends_on=["gone"]), make_task("b")])
    assert validate_dependencies(graph, "b", ["a"])["valid"] is True


def test_graph_later_entry_replaces_earlier(make_task) -> None:
    graph = TaskGraph([make_task("a"), make_task("a", depends_on=["b"]), make_task("b")])
    assert len(graph) == 2
    assert graph.dependencies_of("a") == ["b"]


def test_transitive_dependencies_are_preorder_and_deduplicated(make_task) -> None:
    # d -> [b, c], b -> [a], c -> [a]
    graph = TaskGraph(
        [
            make_task("a"),
            make_task("b", depends_on=["a"]),
            make_task("c", depends_on=["a"]),
            make_task("d", depends_on=["b", "c"]),
        ]
    )
    assert [task["id"] for task in graph.transitive_dependencies("d")] == ["b", "a", "c"]


def test_transitive_dependencies_handle_long_chains(make_task) -> None:
    count = 5000
    tasks = [make_task(f"t{i}", depends_on=[f"t{i + 1}"]) for i in range(count)]
    tasks.append(make_task(f"t{count}"))
    graph = TaskGraph(tasks)
    assert len(graph.transitive_dependencies("t0")) == count
