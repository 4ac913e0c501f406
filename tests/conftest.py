# SPDX-License-Identifier: MIT

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pendulum
import pytest
from yaml import dump

from taskweave import configuration
from taskweave.model.task import Priority, Recurrence, Task
from taskweave.repository.configuration import CONFIGURATION_REPO
from taskweave.repository.id_map import ID_MAP_REPO
from taskweave.repository.task import TaskRepository
from taskweave.service.task import TaskService
from taskweave.state import set_task_service
from taskweave.view import state as view_state

from .fakes import FakeClock, InMemoryTaskRepo

NOW = pendulum.datetime(2024, 3, 15, 12, 0, tz="UTC")


@pytest.fixture(autouse=True)
def local_timezone() -> Iterator[None]:
    """Run every test on a UTC local calendar unless it pins another zone."""
    pendulum.set_local_timezone(pendulum.timezone("UTC"))
    yield
    pendulum.set_local_timezone()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture()
def repo(clock: FakeClock) -> InMemoryTaskRepo:
    return InMemoryTaskRepo(clock)


@pytest.fixture()
def service(repo: InMemoryTaskRepo, clock: FakeClock) -> TaskService:
    return TaskService(repo, clock=clock)


@pytest.fixture()
def make_task() -> Callable[..., Task]:
    """
    Build a stored-shape task with sensible defaults.

    Tests pass only the fields they care about.
    """

    def _make(id: str, title: str | None = None, **fields: Any) -> Task:
        task: Task = {
            "id": id,
            "title": title if title is not None else id,
            "description": None,
            "completed": False,
            "priority": Priority.MEDIUM,
            "recurrence": Recurrence.NONE,
            "due_date": None,
            "depends_on": [],
            "created_at": NOW,
            "updated_at": NOW,
        }
        task.update(fields)  # type: ignore[typeddict-item]
        return task

    return _make


@pytest.fixture()
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TaskService]:
    """
    Point every path the CLI touches at ``tmp_path``.

    A default config file is written, the shared repositories are reset,
    and a YAML-backed service is installed for the commands to use.
    """
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()
    (data_dir / "tasks").mkdir(parents=True)

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_TASKS_DIR", data_dir / "tasks")
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_dir / "id_map.yaml")
    monkeypatch.setattr(configuration, "DATA_LOG_PATH", data_dir / "taskweave.log")

    config = configuration.get_default_configuration()
    config["show_header"] = False
    configuration.APP_CONFIG_PATH.write_text(dump(dict(config)))

    CONFIGURATION_REPO.reset()
    ID_MAP_REPO.reset()
    view_state.set_show_header(False)

    service = TaskService(TaskRepository(data_dir / "tasks"))
    set_task_service(service)
    yield service

    set_task_service(None)
    CONFIGURATION_REPO.reset()
    ID_MAP_REPO.reset()
    view_state.set_show_header(True)
