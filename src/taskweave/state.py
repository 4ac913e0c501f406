# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

from taskweave import configuration
from taskweave.configuration import DeletionPolicy
from taskweave.repository.configuration import CONFIGURATION_REPO
from taskweave.repository.task import TaskRepository
from taskweave.service.task import TaskService

_task_service: ContextVar[Optional[TaskService]] = ContextVar(
    "task_service", default=None
)


def set_task_service(service: Optional[TaskService]) -> None:
    _task_service.set(service)


def peek_task_service() -> Optional[TaskService]:
    return _task_service.get()


def get_task_service() -> TaskService:
    """The service for the configured data directory, built on first use."""
    service = _task_service.get()
    if service is None:
        config = CONFIGURATION_REPO.get_config()
        service = TaskService(
            TaskRepository(configuration.DATA_TASKS_DIR),
            deletion_policy=DeletionPolicy(config["deletion_policy"]),
        )
        _task_service.set(service)
    return service
