# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from taskweave.model.entity_id import EntityId
from taskweave.repository.id_map import ID_MAP_REPO
from taskweave.time import datetime_from_str_utc


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        days_offset = int(datetime)
        pendulum_date_time = pendulum.today().add(days=days_offset).start_of("day")
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now().in_tz("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today().start_of("day").in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday().start_of("day").in_tz("UTC")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow().start_of("day").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def parse_task_id(id_param: str) -> EntityId:
    """
    Resolve a task reference typed by the user.

    Short numeric ids come from the tables; anything else is taken as a
    full task id.
    """
    if not id_param.strip():
        raise typer.BadParameter("Task id cannot be empty")
    return ID_MAP_REPO.resolve(id_param)


def parse_task_id_list(id_params: Optional[list[str]]) -> Optional[list[EntityId]]:
    """
    Resolve repeated and/or comma-separated task references.

    Returns None when the option was not given at all.
    """
    if id_params is None:
        return None
    ids: list[EntityId] = []
    for id_param in id_params:
        for id_str in id_param.split(","):
            if id_str.strip():
                ids.append(parse_task_id(id_str))
    return ids
