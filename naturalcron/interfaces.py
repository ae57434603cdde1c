"""Shared types used when building cron expressions."""

from enum import Enum


class CronTimeUnit(str, Enum):
    """A field of a five-part cron expression, in expression order."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "dayOfMonth"
    MONTH = "month"
    DAY_OF_WEEK = "dayOfWeek"

    def __str__(self) -> str:
        return self.value