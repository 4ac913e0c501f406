# SPDX-License-Identifier: MIT

import atexit

from taskweave.repository.configuration import CONFIGURATION_REPO
from taskweave.repository.id_map import ID_MAP_REPO
from taskweave.state import peek_task_service


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()

    service = peek_task_service()
    if service is not None:
        service.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
