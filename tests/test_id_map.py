# SPDX-License-Identifier: MIT

from __future__ import annotations

from taskweave import configuration
from taskweave.repository.id_map import IdMapRepository


def test_short_ids_are_stable_and_persisted(cli_env) -> None:
    id_map = IdMapRepository()
    assert id_map.associate_id("task-a") == 1
    assert id_map.associate_id("task-b") == 2
    assert id_map.associate_id("task-a") == 1
    assert id_map.flush() is True

    reloaded = IdMapRepository()
    assert reloaded.get_real_id(2) == "task-b"
    assert configuration.DATA_ID_MAP_PATH.is_file()


def test_resolve_accepts_short_or_full_ids(cli_env) -> None:
    id_map = IdMapRepository()
    id_map.associate_id("task-a")

    assert id_map.resolve("1") == "task-a"
    assert id_map.resolve(" task-a ") == "task-a"
    # Unknown short ids pass through unchanged
    assert id_map.resolve("7") == "7"


def test_forget_and_clear(cli_env) -> None:
    id_map = IdMapRepository()
    id_map.associate_id("task-a")
    id_map.associate_id("task-b")

    id_map.forget("task-a")
    assert id_map.get_real_id(1) is None
    assert id_map.associate_id("task-c") == 3

    id_map.clear_ids()
    assert id_map.associate_id("task-d") == 1
