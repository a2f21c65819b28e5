from __future__ import annotations

from typing import IO

from ._ast import (
    FIELDS,
    Exact,
    ExpressionData,
    FieldMatcher,
    FieldSpec,
    Period,
    Range,
    ValueList,
    Wildcard,
)
from ._cache import ExpressionCache
from ._error import (
    CronError,
    CronErrorKind,
    FieldCountError,
    InvalidInputError,
    NoCommandError,
    OutOfBoundsError,
    ParseError,
    Span,
    UnknownTokenError,
)
from ._expression import Action, Expression
from ._lexer import classify, normalize


def parse(source: str | IO[str] | IO[bytes]) -> Expression:
    return Expression.parse(source)


__all__ = [
    "Expression",
    "ExpressionCache",
    "Action",
    "parse",
    "classify",
    "normalize",
    "CronError",
    "CronErrorKind",
    "ParseError",
    "UnknownTokenError",
    "OutOfBoundsError",
    "FieldCountError",
    "InvalidInputError",
    "NoCommandError",
    "Span",
    "FIELDS",
    "FieldSpec",
    "FieldMatcher",
    "ExpressionData",
    "Wildcard",
    "Exact",
    "Range",
    "ValueList",
    "Period",
]
