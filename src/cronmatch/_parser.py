from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
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
    new_expression_data,
)
from ._error import FieldCountError, InvalidInputError, OutOfBoundsError, Span
from ._lexer import classify, tokenize

logger = logging.getLogger(__name__)


def check_field(
    matcher: FieldMatcher,
    spec: FieldSpec,
    span: Span | None = None,
    input_text: str | None = None,
) -> FieldMatcher:
    """Validate a matcher against a field's bounds and return the finalized matcher.

    Only Period changes here: fields whose minimum is above zero get their phase
    aligned to that minimum, so ``*/2`` on day-of-month hits 1, 3, 5, ...
    """

    def out_of_bounds(value: int) -> OutOfBoundsError:
        return OutOfBoundsError(spec.description, spec.min, spec.max, value, span, input_text)

    match matcher:
        case Wildcard():
            return matcher
        case Exact(value=value):
            if value < spec.min or value > spec.max:
                raise out_of_bounds(value)
            return matcher
        case Range(begin=begin, end=end):
            for bound in (begin, end):
                if bound < spec.min or bound > spec.max:
                    raise out_of_bounds(bound)
            return matcher
        case ValueList(items=items):
            for item in items:
                check_field(item, spec, span, input_text)
            return matcher
        case Period(step=step):
            # step 0 is rejected even on fields whose minimum is 0
            if step < spec.min or step > spec.max or step == 0:
                raise out_of_bounds(step)
            return replace(matcher, phase=spec.min if spec.min > 0 else 0)

    raise TypeError(f"unknown matcher type: {type(matcher)}")  # pragma: no cover


def read_input(source: str | IO[str] | IO[bytes]) -> str:
    """Materialize expression text from a string or a readable stream."""
    if isinstance(source, str):
        return source
    read = getattr(source, "read", None)
    if not callable(read):
        raise InvalidInputError(source)
    content = read()
    if isinstance(content, bytes):
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidInputError(source) from None
    if not isinstance(content, str):
        raise InvalidInputError(content)
    return content


def resolve(
    matchers: Sequence[FieldMatcher],
    spans: Sequence[Span | None] | None = None,
    input_text: str | None = None,
) -> ExpressionData:
    """Check arity, validate every matcher against its field and build the data.

    Nothing is returned unless all fields pass.
    """
    if len(matchers) not in (len(FIELDS), len(FIELDS) - 1):
        raise FieldCountError(len(matchers), input_text)
    if spans is None:
        spans = [None] * len(matchers)

    validated = [
        check_field(matcher, spec, span, input_text)
        for matcher, spec, span in zip(matchers, FIELDS, spans)
    ]
    return new_expression_data(validated)


def parse(source: str | IO[str] | IO[bytes]) -> ExpressionData:
    input_text = read_input(source)
    tokens = tokenize(input_text)
    matchers = [classify(tok.text, tok.span, input_text) for tok in tokens]
    data = resolve(matchers, [tok.span for tok in tokens], input_text)
    logger.debug("parsed %r into %d fields (year=%s)", input_text, len(tokens), data.has_year)
    return data
