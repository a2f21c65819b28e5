from __future__ import annotations

import re
from dataclasses import dataclass

from ._ast import Exact, FieldMatcher, Period, Range, ValueList, Wildcard
from ._error import Span, UnknownTokenError

# --- Token shapes, tried in order ---

_PERIOD = re.compile(r"\*/([0-9]+)")
_RANGE = re.compile(r"([0-9]+)-([0-9]+)")
_VALUE = re.compile(r"[0-9]+")
_LIST = re.compile(r"(?:[0-9]+,)+[0-9]+")

_WHITESPACE = re.compile(r"\s+")
_FIELD = re.compile(r"\S+")

# No field bound has more digits than this; longer runs are never converted.
_MAX_DIGITS = 9
OVERSIZED = 10**_MAX_DIGITS


@dataclass(frozen=True, slots=True)
class Token:
    text: str
    span: Span


def normalize(input_text: str) -> str:
    """Collapse whitespace runs to single spaces and trim both ends."""
    return _WHITESPACE.sub(" ", input_text).strip()


def tokenize(input_text: str) -> list[Token]:
    return [
        Token(m.group(0), Span(m.start(), m.end())) for m in _FIELD.finditer(input_text)
    ]


def classify(
    token: str, span: Span | None = None, input_text: str | None = None
) -> FieldMatcher:
    """Map one field token to the matcher variant its shape selects."""
    if token == "" or token == "*":
        return Wildcard()

    m = _PERIOD.fullmatch(token)
    if m:
        return Period(_number(m.group(1)))

    m = _RANGE.fullmatch(token)
    if m:
        return Range(_number(m.group(1)), _number(m.group(2)))

    if _VALUE.fullmatch(token):
        return Exact(_number(token))

    if _LIST.fullmatch(token):
        return ValueList(tuple(Exact(_number(part)) for part in token.split(",")))

    raise UnknownTokenError(token, span, input_text)


def _number(digits: str) -> int:
    """Convert a digit run, mapping anything too long for a field to OVERSIZED."""
    significant = digits.lstrip("0")
    if len(significant) > _MAX_DIGITS:
        return OVERSIZED
    return int(significant or "0")
