import pytest

from naturalcron.validators import (
    CronValidationError,
    validate_day_of_month,
    validate_day_of_week,
    validate_hour,
    validate_minute,
    validate_month,
    validate_time,
    validate_time_unit,
)


@pytest.mark.parametrize("minute", [0, 30, 59])
def test_valid_minutes_pass_through(minute):
    assert validate_minute(minute) == minute


@pytest.mark.parametrize(
    "minute, message",
    [
        (-1, "Invalid minute: -1. Minute should be between 0 and 59."),
        (60, "Invalid minute: 60. Minute should be between 0 and 59."),
    ],
)
def test_invalid_minutes(minute, message):
    with pytest.raises(CronValidationError) as info:
        validate_minute(minute)
    assert str(info.value) == message


@pytest.mark.parametrize("hour", [0, 12, 23])
def test_valid_hours_pass_through(hour):
    assert validate_hour(hour) == hour


@pytest.mark.parametrize(
    "hour, message",
    [
        (-1, "Invalid hour: -1. Hour should be between 0 and 23."),
        (24, "Invalid hour: 24. Hour should be between 0 and 23."),
    ],
)
def test_invalid_hours(hour, message):
    with pytest.raises(CronValidationError) as info:
        validate_hour(hour)
    assert str(info.value) == message


@pytest.mark.parametrize("day", [1, 15, 31])
def test_valid_days_of_month(day):
    assert validate_day_of_month(day) == day


@pytest.mark.parametrize(
    "day, message",
    [
        (32, "Invalid day of month: 32. Day should be between 1 and 31."),
        (0, "Invalid day of month: 0. Day should be between 1 and 31."),
    ],
)
def test_invalid_days_of_month(day, message):
    with pytest.raises(CronValidationError) as info:
        validate_day_of_month(day)
    assert str(info.value) == message


@pytest.mark.parametrize("month", [1, 6, 12])
def test_valid_months(month):
    assert validate_month(month) == month


@pytest.mark.parametrize(
    "month, message",
    [
        (0, "Invalid month: 0. Month should be between 1 and 12."),
        (13, "Invalid month: 13. Month should be between 1 and 12."),
    ],
)
def test_invalid_months(month, message):
    with pytest.raises(CronValidationError) as info:
        validate_month(month)
    assert str(info.value) == message


@pytest.mark.parametrize("day", [0, 3, 6])
def test_valid_days_of_week(day):
    assert validate_day_of_week(day) == day


@pytest.mark.parametrize(
    "day, message",
    [
        (
            8,
            "Invalid day of week: 8. Day should be between 0 (Sunday) and 6 (Saturday).",
        ),
        (
            -3,
            "Invalid day of week: -3. Day should be between 0 (Sunday) and 6 (Saturday).",
        ),
    ],
)
def test_invalid_days_of_week(day, message):
    with pytest.raises(CronValidationError) as info:
        validate_day_of_week(day)
    assert str(info.value) == message


@pytest.mark.parametrize(
    "text, expected",
    [
        ("14:30", (14, 30)),
        ("00:00", (0, 0)),
        ("12:00", (12, 0)),
        ("7:5", (7, 5)),
        ("17:30", (17, 30)),
    ],
)
def test_valid_times(text, expected):
    assert validate_time(text) == expected


@pytest.mark.parametrize("text", ["25:00", "23:60", "14:30:10", "25:61", "14:30\n"])
def test_invalid_times(text):
    with pytest.raises(CronValidationError) as info:
        validate_time(text)
    assert str(info.value) == f"Invalid time format for 'at': {text}"


@pytest.mark.parametrize("unit", ["minute", "hour", "day", "month", "week"])
def test_valid_time_units(unit):
    assert validate_time_unit(unit) == unit


def test_invalid_time_unit():
    with pytest.raises(CronValidationError) as info:
        validate_time_unit("decade")
    assert str(info.value) == "Invalid time unit for cron: decade"


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        validate_month(13)