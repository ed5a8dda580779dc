"""Tests for the Adapter accessors and AdapterOptions."""

from types import SimpleNamespace

import pytest

from gquery.adapter import Adapter, read_field, resolve_accessor
from gquery.config import AdapterOptions
from gquery.errors import AdapterError


# ---------------------------------------------------------------------------
# read_field / resolve_accessor
# ---------------------------------------------------------------------------


class TestReadField:
    def test_mapping_key(self):
        assert read_field({"id": "foo"}, "id") == "foo"

    def test_missing_key(self):
        assert read_field({}, "id") is None

    def test_object_attribute(self):
        assert read_field(SimpleNamespace(id="foo"), "id") == "foo"

    def test_primitive_has_no_fields(self):
        assert read_field(42, "id") is None
        assert read_field(None, "children") is None


class TestResolveAccessor:
    def test_none_uses_default(self):
        default = lambda r: "default"  # noqa: E731
        assert resolve_accessor(None, default) is default

    def test_callable_used_as_is(self):
        fn = lambda r: r * 2  # noqa: E731
        assert resolve_accessor(fn, lambda r: None)(5) == 10

    def test_string_reads_field(self):
        accessor = resolve_accessor("baz", lambda r: None)
        assert accessor({"baz": "blah"}) == "blah"

    def test_other_types_rejected(self):
        with pytest.raises(AdapterError):
            resolve_accessor(42, lambda r: None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Adapter defaults
# ---------------------------------------------------------------------------


class TestDefaultAccessors:
    def test_reads_conventional_fields(self):
        adapter = Adapter()
        record = {"id": "i", "name": "n", "class": "c", "children": [{"id": "x"}]}
        assert adapter.get_id(record) == "i"
        assert adapter.get_name(record) == "n"
        assert adapter.get_class(record) == "c"
        assert adapter.get_children(record) == [{"id": "x"}]

    def test_children_default_to_empty(self):
        adapter = Adapter()
        assert adapter.get_children({}) == []
        assert adapter.get_children({"children": None}) == []
        assert adapter.get_children("plain string") == []

    def test_children_list_returned_as_is(self):
        children = [{"id": "a"}]
        assert Adapter().get_children({"children": children}) is children

    def test_tuple_children_become_list(self):
        assert Adapter().get_children({"children": ({"id": "a"},)}) == [{"id": "a"}]

    def test_non_iterable_children_ignored(self):
        assert Adapter().get_children({"children": 5}) == []

    def test_objects_supported(self):
        child = SimpleNamespace(id="child")
        record = SimpleNamespace(id="root", children=[child])
        adapter = Adapter()
        assert adapter.get_id(record) == "root"
        assert adapter.get_children(record) == [child]

    def test_get_attribute(self):
        assert Adapter().get_attribute({"attr": 4}, "attr") == 4


# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------


class TestOverrides:
    def test_string_overrides(self):
        adapter = Adapter({"id": "key", "name": "title", "class": "kind", "children": "items"})
        record = {"key": "k", "title": "t", "kind": "c", "items": [1, 2]}
        assert adapter.get_id(record) == "k"
        assert adapter.get_name(record) == "t"
        assert adapter.get_class(record) == "c"
        assert adapter.get_children(record) == [1, 2]

    def test_function_override(self):
        adapter = Adapter({"name": lambda r: r["tag"].upper()})
        assert adapter.get_name({"tag": "div"}) == "DIV"

    def test_children_function_may_return_generator(self):
        adapter = Adapter({"children": lambda r: (c for c in r.get("kids", []))})
        assert adapter.get_children({"kids": ["a", "b"]}) == ["a", "b"]

    def test_partial_override_keeps_defaults(self):
        adapter = Adapter({"id": "key"})
        record = {"key": "k", "name": "n", "children": [{"key": "c"}]}
        assert adapter.get_id(record) == "k"
        assert adapter.get_name(record) == "n"
        assert adapter.get_children(record) == [{"key": "c"}]

    def test_values_are_not_cached(self):
        adapter = Adapter()
        record = {"id": "before"}
        assert adapter.get_id(record) == "before"
        record["id"] = "after"
        assert adapter.get_id(record) == "after"

    def test_invalid_override_fails_at_construction(self):
        with pytest.raises(AdapterError):
            Adapter({"id": 3})


class TestAdapterOptions:
    def test_from_mapping_maps_class_key(self):
        options = AdapterOptions.from_mapping({"class": "kind"})
        assert options.class_ == "kind"

    def test_unrecognized_keys_ignored(self):
        options = AdapterOptions.from_mapping({"id": "key", "colour": "red"})
        assert options == AdapterOptions(id="key")

    def test_empty_mapping(self):
        assert AdapterOptions.from_mapping(None) == AdapterOptions()
        assert AdapterOptions.from_mapping({}) == AdapterOptions()

    def test_adapter_accepts_options_instance(self):
        adapter = Adapter(AdapterOptions(children="items"))
        assert adapter.get_children({"items": ["x"]}) == ["x"]

    def test_options_are_frozen(self):
        options = AdapterOptions()
        with pytest.raises(AttributeError):
            options.id = "key"  # type: ignore[misc]
