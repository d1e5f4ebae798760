"""Parsing of five-field cron expressions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import FrozenSet, Set

MONTH_NAMES = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
    "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}

DAY_OF_WEEK_NAMES = {
    "SUN": 0, "MON": 1, "TUE": 2, "WED": 3,
    "THU": 4, "FRI": 5, "SAT": 6, "7": 0,
}

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


@dataclass(frozen=True)
class CronParsedFields:
    """The sets of values allowed by each field of a cron expression."""

    minutes: FrozenSet[int] = field(default_factory=frozenset)
    hours: FrozenSet[int] = field(default_factory=frozenset)
    days_of_month: FrozenSet[int] = field(default_factory=frozenset)
    months: FrozenSet[int] = field(default_factory=frozenset)
    days_of_week: FrozenSet[int] = field(default_factory=frozenset)


def _split(text: str, sep: str) -> list:
    parts = text.split(sep)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def name_to_value(
    name: str, parse_months: bool = False, parse_days_of_week: bool = False
) -> int:
    """Resolve a month or weekday name, or read a leading integer."""
    if parse_months and name in MONTH_NAMES:
        return MONTH_NAMES[name]
    if parse_days_of_week and name in DAY_OF_WEEK_NAMES:
        return DAY_OF_WEEK_NAMES[name]
    match = _LEADING_INT.match(name)
    if match is None:
        raise ValueError(f"invalid number '{name}'")
    return int(match.group(1))


def parse_field(
    field: str,
    min_val: int,
    max_val: int,
    parse_months: bool = False,
    parse_days_of_week: bool = False,
) -> Set[int]:
    """Expand one comma-separated cron field into the set of its values."""
    values: Set[int] = set()

    def value_of(text: str) -> int:
        return name_to_value(text, parse_months, parse_days_of_week)

    for item in _split(field, ","):
        if item == "*":
            values.update(range(min_val, max_val + 1))
        elif "/" in item:
            base, _, step_text = item.partition("/")
            step = value_of_int(step_text)
            if step <= 0:
                raise ValueError(f"Step in {item} must be positive")
            start, end = min_val, max_val
            if base != "*":
                if "-" in base:
                    low, _, high = base.partition("-")
                    start, end = value_of(low), value_of(high)
                else:
                    start = end = value_of(base)
            values.update(v for v in range(start, end + 1, step) if min_val <= v <= max_val)
        elif "-" in item:
            low, _, high = item.partition("-")
            start, end = value_of(low), value_of(high)
            if start > end:
                values.update(range(start, max_val + 1))
                values.update(range(min_val, end + 1))
            else:
                values.update(range(start, end + 1))
        else:
            value = value_of(item)
            if not min_val <= value <= max_val:
                raise ValueError(f"Value {item} out of range [{min_val}-{max_val}]")
            values.add(value)

    if not values:
        raise ValueError(f"Field {field} resulted in no valid values.")
    return values


def value_of_int(text: str) -> int:
    return name_to_value(text)


def parse_cron(cron_string: str) -> CronParsedFields:
    """Parse ``minute hour day-of-month month day-of-week``."""
    segments = _split(cron_string, " ")
    if len(segments) != 5:
        raise ValueError("Invalid cron string format, expected 5 fields")
    try:
        return CronParsedFields(
            minutes=frozenset(parse_field(segments[0], 0, 59)),
            hours=frozenset(parse_field(segments[1], 0, 23)),
            days_of_month=frozenset(parse_field(segments[2], 1, 31)),
            months=frozenset(parse_field(segments[3], 1, 12, True)),
            days_of_week=frozenset(parse_field(segments[4], 0, 7, False, True)),
        )
    except ValueError as exc:
        raise ValueError(f"Error parsing cron field: {exc}") from exc