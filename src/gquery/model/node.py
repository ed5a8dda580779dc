"""Node: a single record wrapped with its parent and adapter."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from gquery.adapter import Adapter, read_field
from gquery.errors import InvalidAccessorTargetError

# Values that can never carry a property of their own.
_IMMUTABLE_TYPES = (str, bytes, int, float, complex, bool, tuple, frozenset)


class Node:
    """A single record wrapped by gquery.

    A Node keeps a reference to its parent Node (None for the members of a
    top-level collection) so callers can walk back up the tree.
    """

    def __init__(self, record: Any, parent: Node | None = None, adapter: Adapter | None = None):
        self.record = record
        self.parent = parent
        self.adapter = adapter or Adapter()
        self._children: list[Node] | None = None

    @property
    def id(self) -> Any:
        return self.adapter.get_id(self.record)

    @property
    def name(self) -> Any:
        return self.adapter.get_name(self.record)

    @property
    def class_name(self) -> Any:
        return self.adapter.get_class(self.record)

    @property
    def children(self) -> list[Node]:
        """Child records wrapped as Nodes, built on first access."""
        if self._children is None:
            self._children = [
                Node(child, self, self.adapter) for child in self.adapter.get_children(self.record)
            ]
        return self._children

    def get(self, prop: str) -> Any:
        if self.record is None:
            return None
        return read_field(self.record, prop)

    def set(self, prop: str, value: Any) -> Node:
        """Set *prop* on the wrapped record, in place."""
        record = self.record
        if record is None or isinstance(record, _IMMUTABLE_TYPES):
            raise InvalidAccessorTargetError(
                f"Cannot set a property of a {type(record).__name__}!", target=record
            )

        if isinstance(record, MutableMapping):
            record[prop] = value
        else:
            try:
                setattr(record, prop, value)
            except (AttributeError, TypeError) as exc:
                raise InvalidAccessorTargetError(
                    f"Cannot set a property of {record!r}: {exc}", target=record
                ) from exc

        # Children may have changed along with the record.
        self._children = None
        return self

    def unwrap(self) -> Any:
        return self.record

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Node):
            return self.record is other.record
        return NotImplemented

    def __hash__(self) -> int:
        return id(self.record)

    def __repr__(self) -> str:
        return f"Node({self.record!r})"
