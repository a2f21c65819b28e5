from __future__ import annotations

from ._ast import (
    YEAR_INDEX,
    Exact,
    ExpressionData,
    FieldMatcher,
    Period,
    Range,
    ValueList,
    Wildcard,
)


def display(data: ExpressionData) -> str:
    parts = [field_rule(m) for m in data.fields[:YEAR_INDEX]]
    if data.has_year:
        parts.append(field_rule(data.fields[YEAR_INDEX]))
    return " ".join(parts)


def field_rule(matcher: FieldMatcher) -> str:
    match matcher:
        case Wildcard():
            return "*"
        case Exact(value=value):
            return str(value)
        case Range(begin=begin, end=end):
            return f"{begin}-{end}"
        case ValueList(items=items):
            return ",".join(field_rule(item) for item in items)
        case Period(step=step):
            return f"*/{step}"

    raise TypeError(f"unknown matcher type: {type(matcher)}")  # pragma: no cover
