"""Value comparison and attribute condition evaluation.

Every comparison is done on strings:

    None            -> never matches
    True / False    -> 'true' / 'false'
    integral floats -> no trailing '.0' (1.0 -> '1')
    anything else   -> str(value)
"""

from __future__ import annotations

from typing import Any

from gquery.adapter import Adapter
from gquery.errors import UnsupportedConditionError
from gquery.selector.model import EQUALITY, Condition

__all__ = [
    "check_condition",
    "evaluate_condition",
    "matches_condition",
    "stringify",
    "values_equal",
]


def stringify(value: Any) -> str:
    """Coerce a record value to the string form used in comparisons."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def values_equal(actual: Any, expected: str) -> bool:
    """Compare a record value with a selector literal."""
    if actual is None:
        return False
    return stringify(actual) == expected


def check_condition(condition: Condition, source: str = "") -> None:
    """Raise UnsupportedConditionError unless *condition* can be evaluated."""
    if condition.operator != EQUALITY:
        raise UnsupportedConditionError(
            f"Unknown condition type: {condition.operator!r} (from selector: {source})",
            condition=condition,
            selector=source,
        )


def matches_condition(condition: Condition, record: Any, adapter: Adapter) -> bool:
    """Test an already checked equality condition against *record*."""
    return values_equal(adapter.get_attribute(record, condition.property), condition.value)


def evaluate_condition(condition: Condition, record: Any, adapter: Adapter) -> bool:
    """Evaluate an attribute condition against *record*.

    Only equality is supported: ``[bar="baz"]`` holds when the record's
    ``bar`` attribute, coerced to a string, equals ``baz``.
    """
    check_condition(condition)
    return matches_condition(condition, record, adapter)
