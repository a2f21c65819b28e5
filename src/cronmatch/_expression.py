from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import IO

from ._ast import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    FIELDS,
    HOUR,
    MINUTE,
    MONTH,
    YEAR,
    YEAR_INDEX,
    ExpressionData,
    FieldMatcher,
    FieldSpec,
)
from ._display import display
from ._error import FieldCountError, NoCommandError, ParseError
from ._eval import Timestamp
from ._eval import match_detail as _match_detail
from ._eval import matches as _matches
from ._lexer import classify
from ._parser import check_field, parse, resolve

logger = logging.getLogger(__name__)

Action = Callable[[], object]


class Expression:
    """A parsed cron expression plus the actions to run when it matches.

    Field matchers are immutable once validated; replacing a field goes through
    the ``set_*`` builders, which validate the new matcher first.
    """

    _data: ExpressionData
    _commands: list[Action]

    def __init__(self, data: ExpressionData) -> None:
        if len(data.fields) != len(FIELDS):
            raise FieldCountError(len(data.fields))
        # Checked again here so hand-built data gets the same bounds and phases.
        self._data = ExpressionData(
            fields=[check_field(m, spec) for m, spec in zip(data.fields, FIELDS)],
            has_year=data.has_year,
        )
        self._commands = []

    @classmethod
    def parse(cls, source: str | IO[str] | IO[bytes]) -> Expression:
        return cls(parse(source))

    @classmethod
    def from_matchers(cls, matchers: Sequence[FieldMatcher]) -> Expression:
        return cls(resolve(matchers))

    @classmethod
    def validate(cls, input_text: str) -> bool:
        try:
            parse(input_text)
            return True
        except ParseError:
            return False

    # --- Fields ---

    @property
    def fields(self) -> tuple[FieldMatcher, ...]:
        return tuple(self._data.fields)

    @property
    def has_year(self) -> bool:
        return self._data.has_year

    @property
    def minutes(self) -> FieldMatcher:
        return self._data.fields[0]

    @property
    def hours(self) -> FieldMatcher:
        return self._data.fields[1]

    @property
    def day_of_month(self) -> FieldMatcher:
        return self._data.fields[2]

    @property
    def month(self) -> FieldMatcher:
        return self._data.fields[3]

    @property
    def day_of_week(self) -> FieldMatcher:
        return self._data.fields[4]

    @property
    def year(self) -> FieldMatcher:
        return self._data.fields[YEAR_INDEX]

    def set_minutes(self, value: FieldMatcher | str) -> Expression:
        return self._set(MINUTE, value)

    def set_hours(self, value: FieldMatcher | str) -> Expression:
        return self._set(HOUR, value)

    def set_day_of_month(self, value: FieldMatcher | str) -> Expression:
        return self._set(DAY_OF_MONTH, value)

    def set_month(self, value: FieldMatcher | str) -> Expression:
        return self._set(MONTH, value)

    def set_day_of_week(self, value: FieldMatcher | str) -> Expression:
        return self._set(DAY_OF_WEEK, value)

    def set_year(self, value: FieldMatcher | str) -> Expression:
        self._set(YEAR, value)
        self._data.has_year = True
        return self

    def _set(self, spec: FieldSpec, value: FieldMatcher | str) -> Expression:
        matcher = classify(value) if isinstance(value, str) else value
        self._data.fields[FIELDS.index(spec)] = check_field(matcher, spec)
        return self

    # --- Actions ---

    def add_command(self, command: Action) -> Expression:
        self._commands.append(command)
        return self

    def get_command(self, index: int) -> Action:
        return self._commands[index]

    @property
    def commands(self) -> tuple[Action, ...]:
        return tuple(self._commands)

    @property
    def command_count(self) -> int:
        return len(self._commands)

    # --- Evaluation ---

    def match_detail(self, ts: Timestamp) -> int:
        """Number of fields (0-6) whose matcher accepts the timestamp's component."""
        return _match_detail(self._data, ts)

    def match(self, ts: Timestamp) -> bool:
        return _matches(self._data, ts)

    def match_run(
        self, ts: Timestamp, command: Action | None = None, also: bool = False
    ) -> bool:
        """Run actions if the timestamp matches.

        An immediate ``command`` runs alone unless ``also`` is set, in which case
        the stored commands run after it. Without an immediate command the stored
        commands run, and having none raises NoCommandError.
        """
        if not self.match(ts):
            return False

        if command is not None:
            command()
            if not also:
                return True
        else:
            also = False

        if not also and not self._commands:
            raise NoCommandError()

        logger.debug("running %d command(s) for %r", len(self._commands), self)
        for stored in self._commands:
            stored()
        return True

    def rule(self) -> str:
        return display(self._data)

    def __str__(self) -> str:
        return self.rule()

    def __repr__(self) -> str:
        return f"Expression({self.rule()!r})"
