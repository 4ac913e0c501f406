# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from taskweave import configuration
from taskweave.logging_setup import setup_logging
from taskweave.repository.configuration import CONFIGURATION_REPO
from taskweave.view import state as view_state

logger = logging.getLogger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    setup_logging(
        console_level=config["log_level"].upper(),
        log_file=configuration.DATA_LOG_PATH if config["log_to_file"] else None,
    )
    view_state.set_show_header(config["show_header"])
    logger.debug("Data directory %s", configuration.DATA_PATH)


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_TASKS_DIR.is_dir():
        configuration.DATA_TASKS_DIR.mkdir(parents=True, exist_ok=True)
        (configuration.DATA_TASKS_DIR / ".gitkeep").touch()
