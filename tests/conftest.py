from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

from cronmatch import ExpressionCache

CASES_PATH = Path(__file__).parent / "cases.json"


def load_cases() -> dict:  # type: ignore[type-arg]
    with open(CASES_PATH) as f:
        return json.load(f)


@pytest.fixture
def cache() -> ExpressionCache:
    return ExpressionCache()


@pytest.fixture
def matching_time() -> datetime:
    """Saturday 2020-08-01 11:01, matched by "1 11-12 */2 * *"."""
    return datetime(2020, 8, 1, 11, 1)


@pytest.fixture
def missing_time() -> datetime:
    """Sunday 2020-08-02 11:01, one day off the */2 day-of-month step."""
    return datetime(2020, 8, 2, 11, 1)
