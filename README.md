# naturalcron

Build and validate five-field cron expressions with readable, chainable calls.

## Installation

```
pip install naturalcron
```

## Building expressions

Each `CronExpressionBuilder` method validates its input and then records the matching cron field. It changes the builder in place and returns the same builder, so you can chain calls.

`compile()` returns the expression in the order `minute hour day-of-month month day-of-week`. Any field you have not set becomes `*`. Calling `str()` on a builder gives the same result.

```python
from naturalcron.builder import CronExpressionBuilder
from naturalcron.interfaces import CronTimeUnit

# 08:00 on weekdays
CronExpressionBuilder().at_time("08:00").on_week_days([1, 2, 3, 4, 5]).compile()
# '0 8 * * 1-5'

# every 15 minutes
CronExpressionBuilder().every_x(15, CronTimeUnit.MINUTE).compile()
# '*/15 * * * *'

# noon on the 1st and 15th
CronExpressionBuilder().at_time("12:00").on_days_of_month([1, 15]).compile()
# '0 12 1,15 * *'

# every day at 09:00, 12:00 and 15:00
CronExpressionBuilder().every("day").at_hours([9, 12, 15]).compile()
# '0 9,12,15 * * *'
```

The available steps are:

| Method | Effect |
| --- | --- |
| `at_minutes(minutes)` | minute field (0–59) |
| `at_hours(hours)` | hour field (0–23); sets minute to `0` if it is unset |
| `at_time("HH:MM")` | hour and minute from a time; leading zeros are optional (`"7:5"`) |
| `every(unit)` | `"minute"`, `"hour"`, `"day"`, `"week"` or `"month"` |
| `every_x(interval, unit)` | a step such as `*/5` on the field named by `unit` |
| `on_week_days(days)` | day-of-week field (0 = Sunday … 6 = Saturday) |
| `on_days_of_month(days)` | day-of-month field (1–31) |
| `during_months(months)` | month field (1–12) |

### Units for `every_x`

`every_x` takes a `CronTimeUnit` member or its string value:

| Member | Value |
| --- | --- |
| `CronTimeUnit.MINUTE` | `"minute"` |
| `CronTimeUnit.HOUR` | `"hour"` |
| `CronTimeUnit.DAY_OF_MONTH` | `"dayOfMonth"` |
| `CronTimeUnit.MONTH` | `"month"` |
| `CronTimeUnit.DAY_OF_WEEK` | `"dayOfWeek"` |

The interval is checked against the same range as that field. Apart from the minute step, `every_x` resets the fields smaller than the chosen one, so that the job runs at the start of each period.

### How lists are written

Lists of values are sorted and de-duplicated. Three or more consecutive values collapse to a range, such as `9-16`. Any other list is written with commas.

The helpers that do this are `naturalcron.utils.format_cron_part` and `naturalcron.utils.is_contiguous`.

## Errors

Invalid values raise `naturalcron.validators.CronValidationError`, which is a subclass of `ValueError`. The message names the bad value. The builder is left unchanged when a call fails.

```python
from naturalcron.validators import CronValidationError

try:
    CronExpressionBuilder().at_minutes([60])
except CronValidationError as exc:
    print(exc)  # Invalid minute: 60. Minute should be between 0 and 59.
```

A unit passed to `every_x` that is not a `CronTimeUnit` value raises a plain `ValueError`.

`naturalcron.validators` also provides each check on its own:

- `validate_minute`
- `validate_hour`
- `validate_day_of_month`
- `validate_month`
- `validate_day_of_week`
- `validate_time_unit`

Each of these returns its argument when it is valid. `validate_time` returns an `(hour, minute)` tuple.

## Ready-made schedules

`naturalcron.schedules` holds common expressions as string constants:

```python
from naturalcron import schedules

schedules.EVERY_1ST_DAY_OF_MONTH_AT_MIDNIGHT  # '0 0 1 * *'
schedules.EVERY_2_HOURS                       # '0 0-23/2 * * *'
```

Some of these constants are written with six fields, with a leading seconds field. Examples are `EVERY_5_SECONDS` and `MONDAY_TO_FRIDAY_AT_9AM`. They are meant for schedulers that accept that form.

## What this package does not do

naturalcron only produces expression strings. It does not:

- parse existing cron expressions,
- work out when a schedule next fires,
- run jobs.

## Running the tests

```
pip install -e ".[test]"
pytest
```