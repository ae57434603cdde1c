"""Fluent builder that assembles five-field cron expressions."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from naturalcron.interfaces import CronTimeUnit
from naturalcron.utils import format_cron_part
from naturalcron.validators import (
    validate_day_of_month,
    validate_day_of_week,
    validate_hour,
    validate_minute,
    validate_month,
    validate_time,
    validate_time_unit,
)

_FIELD_ORDER = tuple(unit.value for unit in CronTimeUnit)

_EVERY_SETTINGS: dict[str, dict[str, str]] = {
    "minute": {"minute": "*"},
    "hour": {"minute": "0", "hour": "*"},
    "day": {"minute": "0", "hour": "0", "dayOfMonth": "*"},
    "month": {"minute": "0", "hour": "0", "dayOfMonth": "1", "month": "*"},
    "week": {
        "minute": "0",
        "hour": "0",
        "dayOfWeek": "0",
        "dayOfMonth": "*",
        "month": "*",
    },
}

_EVERY_X_SETTINGS: dict[CronTimeUnit, tuple[Callable[[int], int], dict[str, str]]] = {
    CronTimeUnit.MINUTE: (validate_minute, {"hour": "*"}),
    CronTimeUnit.HOUR: (validate_hour, {"minute": "0"}),
    CronTimeUnit.DAY_OF_MONTH: (validate_day_of_month, {"minute": "0", "hour": "0"}),
    CronTimeUnit.MONTH: (
        validate_month,
        {"minute": "0", "hour": "0", "dayOfMonth": "1"},
    ),
    CronTimeUnit.DAY_OF_WEEK: (validate_day_of_week, {"minute": "0", "hour": "0"}),
}


class CronExpressionBuilder:
    """Collects schedule settings and compiles them into a cron expression.

    Every setter validates its input, raising ``CronValidationError`` on a
    bad value, and returns the builder so calls can be chained.
    """

    def __init__(self) -> None:
        self._schedule: dict[str, str] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._schedule!r})"

    def _set_list(
        self, field: str, values: Iterable[int], validator: Callable[[int], int]
    ) -> CronExpressionBuilder:
        values = [validator(value) for value in values]
        self._schedule[field] = format_cron_part(values)
        return self

    def at_minutes(self, minutes: Iterable[int]) -> CronExpressionBuilder:
        """Run at the given minutes of the hour."""
        return self._set_list("minute", minutes, validate_minute)

    def at_hours(self, hours: Iterable[int]) -> CronExpressionBuilder:
        """Run at the given hours; the minute defaults to 0 if not yet set."""
        self._set_list("hour", hours, validate_hour)
        self._schedule.setdefault("minute", "0")
        return self

    def at_time(self, time: str) -> CronExpressionBuilder:
        """Run at a time given as ``HH:MM``."""
        hour, minute = validate_time(time)
        self._schedule["minute"] = str(minute)
        self._schedule["hour"] = str(hour)
        return self

    def every(self, unit: str) -> CronExpressionBuilder:
        """Run once every minute, hour, day, week or month."""
        validate_time_unit(unit)
        self._schedule.update(_EVERY_SETTINGS[unit])
        return self

    def every_x(self, interval: int, unit: CronTimeUnit | str) -> CronExpressionBuilder:
        """Run every ``interval`` units of the given cron field."""
        unit = CronTimeUnit(unit)
        validator, settings = _EVERY_X_SETTINGS[unit]
        validator(interval)
        self._schedule.update(settings)
        self._schedule[unit.value] = f"*/{interval}"
        return self

    def on_week_days(self, days: Iterable[int]) -> CronExpressionBuilder:
        """Run on the given days of the week (0 is Sunday)."""
        return self._set_list("dayOfWeek", days, validate_day_of_week)

    def on_days_of_month(self, days: Iterable[int]) -> CronExpressionBuilder:
        """Run on the given days of the month."""
        return self._set_list("dayOfMonth", days, validate_day_of_month)

    def during_months(self, months: Iterable[int]) -> CronExpressionBuilder:
        """Run during the given months."""
        return self._set_list("month", months, validate_month)

    def compile(self) -> str:
        """Return the cron expression, with ``*`` for every unset field."""
        return " ".join(self._schedule.get(field, "*") for field in _FIELD_ORDER)

    def __str__(self) -> str:
        return self.compile()