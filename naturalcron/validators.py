"""Range and format checks for the parts of a cron expression."""

import re

_TIME_PATTERN = re.compile(r"([01]?[0-9]|2[0-3]):([0-5]?[0-9])")
_VALID_UNITS = ("minute", "hour", "day", "month", "week")


class CronValidationError(ValueError):
    """Raised when a value cannot be used in a cron expression."""


def validate_minute(minute: int) -> int:
    """Return the minute if it lies between 0 and 59."""
    if not 0 <= minute <= 59:
        raise CronValidationError(
            f"Invalid minute: {minute}. Minute should be between 0 and 59."
        )
    return minute


def validate_hour(hour: int) -> int:
    """Return the hour if it lies between 0 and 23."""
    if not 0 <= hour <= 23:
        raise CronValidationError(
            f"Invalid hour: {hour}. Hour should be between 0 and 23."
        )
    return hour


def validate_day_of_month(day: int) -> int:
    """Return the day of month if it lies between 1 and 31."""
    if not 1 <= day <= 31:
        raise CronValidationError(
            f"Invalid day of month: {day}. Day should be between 1 and 31."
        )
    return day


def validate_month(month: int) -> int:
    """Return the month if it lies between 1 and 12."""
    if not 1 <= month <= 12:
        raise CronValidationError(
            f"Invalid month: {month}. Month should be between 1 and 12."
        )
    return month


def validate_day_of_week(day: int) -> int:
    """Return the day of week if it lies between 0 (Sunday) and 6 (Saturday)."""
    if not 0 <= day <= 6:
        raise CronValidationError(
            f"Invalid day of week: {day}. "
            "Day should be between 0 (Sunday) and 6 (Saturday)."
        )
    return day


def validate_time(time: str) -> tuple[int, int]:
    """Check an ``HH:MM`` string and return its ``(hour, minute)``."""
    match = _TIME_PATTERN.fullmatch(time)
    if match is None:
        raise CronValidationError(f"Invalid time format for 'at': {time}")
    return int(match.group(1)), int(match.group(2))


def validate_time_unit(unit: str) -> str:
    """Return the unit if it is one accepted by ``every``."""
    if unit not in _VALID_UNITS:
        raise CronValidationError(f"Invalid time unit for cron: {unit}")
    return unit