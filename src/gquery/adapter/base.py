"""Adapter: the four accessors gquery uses to read an arbitrary record tree."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable

from gquery.config import Accessor, AdapterOptions
from gquery.errors import AdapterError

__all__ = ["Adapter", "read_field", "resolve_accessor"]


def read_field(record: Any, name: str) -> Any:
    """Read *name* from a record, returning None when it is absent.

    Mappings are read by key; anything else by attribute.
    """
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _field_reader(name: str) -> Callable[[Any], Any]:
    def reader(record: Any) -> Any:
        return read_field(record, name)

    return reader


def resolve_accessor(
    override: Accessor | None, default: Callable[[Any], Any]
) -> Callable[[Any], Any]:
    """Turn an accessor override into a concrete function.

    - callable -> used as-is
    - string   -> reads that field instead
    - None     -> *default*
    """
    if override is None:
        return default
    if callable(override):
        return override
    if isinstance(override, str):
        return _field_reader(override)
    raise AdapterError(
        f"Accessor must be a callable or a field name, got {type(override).__name__}"
    )


class Adapter:
    """Configures how gquery traverses a data structure.

    Each of ``get_id``, ``get_name``, ``get_class`` and ``get_children`` reads
    the conventional field by default and can be overridden through
    *options*, either with a function of the record or with the name of the
    field to read instead::

        Adapter({"id": "key", "children": lambda r: r.get("items", [])})

    Values are re-read on every call, nothing is cached.
    """

    def __init__(self, options: AdapterOptions | Mapping[str, Any] | None = None) -> None:
        if not isinstance(options, AdapterOptions):
            options = AdapterOptions.from_mapping(options)
        self.options = options

        self._get_id = resolve_accessor(options.id, _field_reader("id"))
        self._get_name = resolve_accessor(options.name, _field_reader("name"))
        self._get_class = resolve_accessor(options.class_, _field_reader("class"))
        self._get_children = resolve_accessor(options.children, _field_reader("children"))

    def get_id(self, record: Any) -> Any:
        return self._get_id(record)

    def get_name(self, record: Any) -> Any:
        return self._get_name(record)

    def get_class(self, record: Any) -> Any:
        return self._get_class(record)

    def get_children(self, record: Any) -> list[Any]:
        """Return the record's children, or an empty list if it has none."""
        children = self._get_children(record)
        if not children:
            return []
        if isinstance(children, list):
            return children
        if isinstance(children, (str, bytes, Mapping)) or not isinstance(children, Iterable):
            return []
        return list(children)

    def get_attribute(self, record: Any, name: str) -> Any:
        """Read an arbitrary attribute, as used by ``[name="value"]`` conditions."""
        return read_field(record, name)

    def __repr__(self) -> str:
        return f"Adapter({self.options!r})"
