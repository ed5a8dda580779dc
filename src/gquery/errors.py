"""Error hierarchy for gquery."""

from __future__ import annotations

from typing import Any


class GQueryError(Exception):
    """Base error for all gquery errors."""


class ParseError(GQueryError):
    """Raised when a selector string cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        selector: str = "",
        offset: int | None = None,
    ):
        self.line = line
        self.column = column
        self.selector = selector
        self.offset = offset
        super().__init__(message)


class SelectorSyntaxError(ParseError):
    """The selector contains text the grammar does not recognize."""


class RedundantCombinatorError(ParseError):
    """Two ``>`` combinators appeared with no selector part between them."""


class UnsupportedConditionError(ParseError):
    """A condition uses an operator other than equality."""

    def __init__(self, message: str, *, condition: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.condition = condition


# ---------------------------------------------------------------------------
# Adapter errors
# ---------------------------------------------------------------------------


class AdapterError(GQueryError):
    """Raised for an invalid adapter configuration or record access."""


class InvalidAccessorTargetError(AdapterError):
    """Attempted to set a property on a record that cannot hold one."""

    def __init__(self, message: str, *, target: Any = None) -> None:
        super().__init__(message)
        self.target = target
