"""gquery -- jQuery-style selectors over plain Python data.

Example:

    q = gquery([
        {"id": "foo", "attr": 1},
        {"class": "bar", "attr": 2},
        {"name": "baz", "attr": 3, "children": [{"class": "bar", "attr": 4}]},
    ])

    q("#foo")              # Collection([{'id': 'foo', 'attr': 1}])
    q(".bar")              # both .bar records, in traversal order
    q("baz").prop("attr")  # 3
    q("baz > .bar")        # Collection([{'class': 'bar', 'attr': 4}])
    q('.bar[attr="4"]')    # Collection([{'class': 'bar', 'attr': 4}])
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from gquery.adapter import Adapter
from gquery.config import AdapterOptions
from gquery.engine import Locator
from gquery.errors import (
    AdapterError,
    GQueryError,
    InvalidAccessorTargetError,
    ParseError,
    RedundantCombinatorError,
    SelectorSyntaxError,
    UnsupportedConditionError,
)
from gquery.model import Collection, Node
from gquery.selector import Condition, Kind, SelectorPart, parse_selector

__version__ = "0.3.0"


def gquery(
    context: Any = None,
    options: AdapterOptions | Mapping[str, Any] | None = None,
) -> Callable[[str], Collection]:
    """Wrap *context* and return a jQuery-style query function over it.

    *options* overrides how ids, names, classes and children are read; see
    :class:`~gquery.adapter.Adapter`.
    """
    adapter = Adapter(options)
    root = [] if context is None else context

    def query(selector: str) -> Collection:
        return Collection(Locator(selector, adapter).find(root), adapter)

    return query


__all__ = [
    "__version__",
    "gquery",
    # engine
    "Adapter",
    "AdapterOptions",
    "Locator",
    "parse_selector",
    # model
    "Collection",
    "Node",
    "Condition",
    "Kind",
    "SelectorPart",
    # errors
    "GQueryError",
    "ParseError",
    "SelectorSyntaxError",
    "RedundantCombinatorError",
    "UnsupportedConditionError",
    "AdapterError",
    "InvalidAccessorTargetError",
]
