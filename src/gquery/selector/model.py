"""Selector model: Kind, Condition, and SelectorPart dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Kind(Enum):
    """Which accessor a selector part compares against."""

    ID = "id"
    CLASS = "class"
    NAME = "name"


EQUALITY = "="


@dataclass(frozen=True)
class Condition:
    """An attribute test such as ``[bar="baz"]``."""

    property: str
    value: str
    operator: str = EQUALITY

    def __str__(self) -> str:
        return f'{self.property}{self.operator}"{self.value}"'


@dataclass(frozen=True)
class SelectorPart:
    """One segment of a parsed selector.

    Attributes:
        kind: Id, class, or name match.
        value: The literal id/class/name to look for.
        direct: True when the part followed a ``>`` combinator.
        condition: Optional attribute test ANDed with the base match.
        source: The raw selector text this part came from.
    """

    kind: Kind
    value: str
    direct: bool = False
    condition: Condition | None = None
    source: str = ""

    def __str__(self) -> str:
        text = f"kind={self.kind.value} value={self.value} direct={str(self.direct).lower()}"
        if self.condition is not None:
            text += f" condition={self.condition}"
        return text
