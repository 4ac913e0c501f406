# SPDX-License-Identifier: MIT

from typing import Callable, Optional, TypeAlias, cast

import pendulum

Clock: TypeAlias = Callable[[], pendulum.DateTime]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def datetime_to_display_local_date_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_date_str(datetime)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"Not a datetime: {datetime!r}")
    return parsed.in_tz("UTC")


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    """Parse a wall-clock string typed by the user as local time, return UTC."""
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))
    return pendulum_date_time.in_tz("UTC")
