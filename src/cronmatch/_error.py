from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class Span:
    start: int
    end: int


CronErrorKind = Literal["lex", "bounds", "arity", "input", "run"]


class CronError(Exception):
    kind: CronErrorKind
    span: Span | None
    input_text: str | None

    def __init__(
        self,
        kind: CronErrorKind,
        message: str,
        span: Span | None = None,
        input_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.span = span
        self.input_text = input_text

    def display_rich(self) -> str:
        if self.span and self.input_text:
            out = f"error: {self}\n"
            out += f"  {self.input_text}\n"
            padding = " " * (self.span.start + 2)
            underline = "^" * max(self.span.end - self.span.start, 1)
            return out + padding + underline
        return f"error: {self}"


class ParseError(CronError):
    """Raised while turning expression text into an Expression."""


class UnknownTokenError(ParseError):
    token: str

    def __init__(
        self, token: str, span: Span | None = None, input_text: str | None = None
    ) -> None:
        super().__init__("lex", f"syntax error: unknown token: {token}", span, input_text)
        self.token = token


class OutOfBoundsError(ParseError):
    description: str
    min: int
    max: int
    value: int | None

    def __init__(
        self,
        description: str,
        min_value: int,
        max_value: int,
        value: int | None = None,
        span: Span | None = None,
        input_text: str | None = None,
    ) -> None:
        super().__init__(
            "bounds",
            f"syntax error: out of bound: {description} ({min_value} ~ {max_value})",
            span,
            input_text,
        )
        self.description = description
        self.min = min_value
        self.max = max_value
        self.value = value


class FieldCountError(ParseError):
    count: int

    def __init__(self, count: int, input_text: str | None = None) -> None:
        super().__init__("arity", "syntax error: incorrect field number", None, input_text)
        self.count = count


class InvalidInputError(ParseError):
    def __init__(self, received: object) -> None:
        super().__init__("input", f"invalid input: {type(received).__name__}")


class NoCommandError(CronError):
    def __init__(self) -> None:
        super().__init__("run", "no command")
