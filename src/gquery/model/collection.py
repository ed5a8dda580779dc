"""Collection: an ordered, chainable result set of Nodes."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from typing import Any, overload

from gquery.adapter import Adapter
from gquery.engine import Locator
from gquery.model.node import Node

_MISSING = object()


class Collection(Sequence[Node]):
    """A sequence of records wrapped by gquery.

    >>> collection = Collection([{"id": "foo", "tag": 1, "children": [{"class": "bar"}]}])
    >>> collection.find("#foo").prop("tag")
    1
    >>> collection.find("#foo").find(".bar").unwrap()
    [{'class': 'bar'}]
    """

    def __init__(self, source: Iterable[Any] | None = None, adapter: Adapter | None = None):
        self.adapter = adapter or Adapter()
        self.nodes: list[Node] = [
            item if isinstance(item, Node) else Node(item, None, self.adapter)
            for item in (source or [])
        ]

    @overload
    def __getitem__(self, index: int) -> Node: ...

    @overload
    def __getitem__(self, index: slice) -> Collection: ...

    def __getitem__(self, index: int | slice) -> Node | Collection:
        if isinstance(index, slice):
            return Collection(self.nodes[index], self.adapter)
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def first(self) -> Node | None:
        return self.nodes[0] if self.nodes else None

    def prop(self, name: str, value: Any = _MISSING) -> Any:
        """Get or set the property *name*.

        With only *name*, returns the property of the first element (None
        for an empty collection). With *value*, sets it on every element and
        returns the collection.
        """
        if value is _MISSING:
            first = self.first()
            return first.get(name) if first is not None else None

        for node in self.nodes:
            node.set(name, value)
        return self

    def find(self, selector: str) -> Collection:
        """Find all matches for *selector* within this collection's records."""
        return Collection(Locator(selector, self.adapter).find(self.unwrap()), self.adapter)

    def unwrap(self) -> list[Any]:
        return [node.record for node in self.nodes]

    def inspect(self) -> str:
        """Render the wrapped records as indented JSON."""
        return json.dumps(self.unwrap(), indent=2, default=repr)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self.unwrap() == other.unwrap()
        if isinstance(other, list):
            return self.unwrap() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Collection({self.unwrap()!r})"
