# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskweave import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is None:
            raise ValueError(f"Empty configuration file: {configuration.APP_CONFIG_PATH}")
        self._config = loaded

        # Fill keys added after the file was first written
        for key, value in configuration.get_default_configuration().items():
            if key not in loaded:
                loaded[key] = value  # type: ignore[literal-required]
                self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop the cached config so the next access re-reads the file."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        default_sort_field: Optional[str] = None,
        default_sort_direction: Optional[str] = None,
        deletion_policy: Optional[str] = None,
        log_level: Optional[str] = None,
        log_to_file: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if default_sort_field is not None:
            self.config["default_sort_field"] = default_sort_field
        if default_sort_direction is not None:
            self.config["default_sort_direction"] = default_sort_direction
        if deletion_policy is not None:
            self.config["deletion_policy"] = deletion_policy
        if log_level is not None:
            self.config["log_level"] = log_level
        if log_to_file is not None:
            self.config["log_to_file"] = log_to_file


CONFIGURATION_REPO = ConfigurationRepository()
