"""Helpers for turning lists of numbers into cron field text."""

from collections.abc import Iterable


def is_contiguous(numbers: Iterable[int]) -> bool:
    """Return True if the numbers, once sorted, step by exactly one."""
    ordered = sorted(numbers)
    return all(b == a + 1 for a, b in zip(ordered, ordered[1:]))


def format_cron_part(values: Iterable[int]) -> str:
    """Format numbers as a range (``a-b``) or a comma separated list."""
    unique = sorted(set(values))
    if len(unique) > 2 and is_contiguous(unique):
        return f"{unique[0]}-{unique[-1]}"
    return ",".join(str(v) for v in unique)