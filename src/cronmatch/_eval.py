from __future__ import annotations

from datetime import date, datetime, time

import dateutil.parser

from ._ast import Exact, ExpressionData, FieldMatcher, Period, Range, ValueList, Wildcard

Timestamp = datetime | date | str | int | float


def to_datetime(ts: Timestamp) -> datetime:
    """Coerce a supported timestamp value into a datetime.

    Text goes through ``dateutil.parser.parse``; POSIX timestamps become local time.
    No timezone conversion is applied to datetimes that already carry one.
    """
    # datetime is a date subclass, so it has to be checked first
    if isinstance(ts, datetime):
        return ts
    if isinstance(ts, date):
        return datetime.combine(ts, time())
    if isinstance(ts, str):
        return dateutil.parser.parse(ts)
    if isinstance(ts, (int, float)) and not isinstance(ts, bool):
        return datetime.fromtimestamp(ts)
    raise TypeError(f"unsupported timestamp type: {type(ts).__name__}")


def extract(dt: datetime) -> tuple[int, int, int, int, int, int]:
    """Calendar components in field order; day-of-week counts Sunday as 0."""
    return (dt.minute, dt.hour, dt.day, dt.month, dt.isoweekday() % 7, dt.year)


def field_matches(matcher: FieldMatcher, value: int) -> bool:
    match matcher:
        case Wildcard():
            return True
        case Exact(value=expected):
            return value == expected
        case Range(begin=begin, end=end):
            return begin <= value <= end
        case ValueList(items=items):
            return any(field_matches(item, value) for item in items)
        case Period(step=step, phase=phase):
            return (value - phase) % step == 0

    raise TypeError(f"unknown matcher type: {type(matcher)}")  # pragma: no cover


def match_detail(data: ExpressionData, ts: Timestamp) -> int:
    components = extract(to_datetime(ts))
    return sum(
        1 for matcher, value in zip(data.fields, components) if field_matches(matcher, value)
    )


def matches(data: ExpressionData, ts: Timestamp) -> bool:
    return match_detail(data, ts) == len(data.fields)
