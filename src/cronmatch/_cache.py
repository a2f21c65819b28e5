from __future__ import annotations

import logging
import threading

from ._expression import Expression
from ._lexer import normalize

logger = logging.getLogger(__name__)


class ExpressionCache:
    """Normalized-text lookup of parsed expressions.

    Entries are built on first use and kept for the life of the cache, so
    actions registered on a looked-up Expression are seen by later lookups of
    the same text.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Expression] = {}
        self._lock = threading.Lock()

    def lookup(self, input_text: str) -> Expression:
        key = normalize(input_text)
        with self._lock:
            expr = self._entries.get(key)
            if expr is None:
                logger.debug("cache miss for %r", key)
                # A parse failure leaves no entry behind.
                expr = Expression.parse(key)
                self._entries[key] = expr
            return expr

    expr = lookup

    def __contains__(self, input_text: object) -> bool:
        return isinstance(input_text, str) and normalize(input_text) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
