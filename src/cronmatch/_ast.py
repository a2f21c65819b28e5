from __future__ import annotations

from dataclasses import dataclass

# --- Field table ---


@dataclass(frozen=True, slots=True)
class FieldSpec:
    name: str
    description: str
    min: int
    max: int

    def __str__(self) -> str:
        return f"{self.description} ({self.min} ~ {self.max})"


MINUTE = FieldSpec("minute", "minutes", 0, 59)
HOUR = FieldSpec("hour", "hours", 0, 23)
DAY_OF_MONTH = FieldSpec("day_of_month", "day of month", 1, 31)
MONTH = FieldSpec("month", "month", 1, 12)
DAY_OF_WEEK = FieldSpec("day_of_week", "day of week", 0, 6)
YEAR = FieldSpec("year", "year", 1970, 2099)

FIELDS: tuple[FieldSpec, ...] = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK, YEAR)

# Index of the optional trailing field.
YEAR_INDEX = len(FIELDS) - 1


# --- Field matchers ---


@dataclass(frozen=True, slots=True)
class Wildcard:
    pass


@dataclass(frozen=True, slots=True)
class Exact:
    value: int


@dataclass(frozen=True, slots=True)
class Range:
    begin: int
    end: int


@dataclass(frozen=True, slots=True)
class ValueList:
    items: tuple[Exact, ...]


@dataclass(frozen=True, slots=True)
class Period:
    step: int
    # Alignment offset; only ever set by validation against a field's bounds.
    phase: int = 0


FieldMatcher = Wildcard | Exact | Range | ValueList | Period


# --- Expression data (top-level) ---


@dataclass(slots=True)
class ExpressionData:
    fields: list[FieldMatcher]
    has_year: bool = False


def new_expression_data(matchers: list[FieldMatcher]) -> ExpressionData:
    """Build expression data from already validated matchers.

    Five matchers get a trailing wildcard year; six keep the one supplied.
    """
    if len(matchers) == len(FIELDS):
        return ExpressionData(fields=list(matchers), has_year=True)
    return ExpressionData(fields=[*matchers, Wildcard()], has_year=False)
