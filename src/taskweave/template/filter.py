# SPDX-License-Identifier: MIT

from taskweave.model.filter import (
    CompletionFilter,
    SortDirection,
    SortField,
    TaskFilter,
    TaskSort,
)


def get_task_filter_template() -> TaskFilter:
    return {
        "search_term": "",
        "priorities": [],
        "show_completed": CompletionFilter.ALL,
        "recurrence": None,
    }


def get_task_sort_template() -> TaskSort:
    return {
        "field": SortField.CREATED_AT,
        "direction": SortDirection.DESC,
    }
