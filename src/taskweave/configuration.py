# SPDX-License-Identifier: MIT

from enum import StrEnum
from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "taskweave"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_DIR: Path = DATA_PATH / "tasks"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"
DATA_LOG_PATH: Path = DATA_PATH / "taskweave.log"


class DeletionPolicy(StrEnum):
    BLOCK = "block"
    CASCADE = "cascade"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    default_sort_field: str
    default_sort_direction: str
    deletion_policy: str
    log_level: str
    log_to_file: bool


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "default_sort_field": "created_at",
        "default_sort_direction": "desc",
        "deletion_policy": DeletionPolicy.BLOCK.value,
        "log_level": "WARNING",
        "log_to_file": False,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TASKS_DIR, DATA_ID_MAP_PATH, DATA_LOG_PATH

    DATA_PATH = data_path
    DATA_TASKS_DIR = DATA_PATH / "tasks"
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
    DATA_LOG_PATH = DATA_PATH / "taskweave.log"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
