from gquery.adapter.base import Adapter, read_field, resolve_accessor

__all__ = ["Adapter", "read_field", "resolve_accessor"]
