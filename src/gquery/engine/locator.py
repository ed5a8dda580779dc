"""Locator: applies a parsed selector to one or more record trees.

Each selector part is matched in turn. A part searches the current record
list (recursively, unless it follows ``>``); for every part but the last,
the children of its matches become the record list for the next part.

Results keep traversal order and are not deduplicated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Callable

from gquery.adapter import Adapter
from gquery.conditions import check_condition, matches_condition, values_equal
from gquery.selector import Kind, SelectorPart, parse_selector

__all__ = ["Locator", "LocatorPart", "search_matches"]

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]

_DONE = object()


def search_matches(
    records: Iterable[Any],
    recursive: bool,
    predicate: Predicate,
    adapter: Adapter,
) -> list[Any]:
    """Collect the records satisfying *predicate*, in pre-order.

    With *recursive* set, the children of every visited record are searched
    too. A record reached again below itself is skipped.

    The walk keeps its own stack, so tree depth is not limited by the
    interpreter's recursion limit.
    """
    if not recursive:
        return [record for record in records if predicate(record)]

    matches: list[Any] = []
    ancestors: set[int] = set()
    # Each frame is (remaining siblings, key of the record that owns them).
    stack: list[tuple[Iterator[Any], int | None]] = [(iter(records), None)]

    while stack:
        siblings, owner = stack[-1]
        record = next(siblings, _DONE)
        if record is _DONE:
            stack.pop()
            if owner is not None:
                ancestors.discard(owner)
            continue

        key = id(record)
        if key in ancestors:
            logger.warning("Cycle detected at %r; skipping the repeated branch", record)
            continue

        if predicate(record):
            matches.append(record)

        ancestors.add(key)
        stack.append((iter(adapter.get_children(record)), key))

    return matches


class LocatorPart:
    """One part of a Locator: a SelectorPart bound to an Adapter."""

    def __init__(self, part: SelectorPart, adapter: Adapter) -> None:
        if part.condition is not None:
            check_condition(part.condition, part.source)

        self.part = part
        self.adapter = adapter
        self.matches = self._build_predicate()

    @property
    def direct(self) -> bool:
        return self.part.direct

    def _build_predicate(self) -> Predicate:
        predicate = self._base_predicate()
        condition = self.part.condition
        if condition is None:
            return predicate

        adapter = self.adapter

        def conditional(record: Any) -> bool:
            if not predicate(record):
                return False
            return matches_condition(condition, record, adapter)

        return conditional

    def _base_predicate(self) -> Predicate:
        accessors = {
            Kind.ID: self.adapter.get_id,
            Kind.CLASS: self.adapter.get_class,
            Kind.NAME: self.adapter.get_name,
        }
        accessor = accessors[self.part.kind]
        value = self.part.value

        def predicate(record: Any) -> bool:
            return values_equal(accessor(record), value)

        return predicate

    def __repr__(self) -> str:
        return f"LocatorPart({self.part.source or self.part.value!r}, direct={self.direct})"


class Locator:
    """Takes a selector and applies it to search a data structure.

    *selector* may be a selector string or an already parsed list of
    SelectorParts; parsing happens once, here, so a Locator can be reused
    across any number of ``find`` calls.

    >>> Locator("foo > bar").find([{"name": "foo", "children": [{"name": "bar"}]}])
    [{'name': 'bar'}]
    """

    def __init__(
        self,
        selector: str | Sequence[SelectorPart] | None,
        adapter: Adapter | None = None,
    ) -> None:
        self.adapter = adapter or Adapter()
        if selector is None or isinstance(selector, str):
            self.source = selector or ""
            parsed = parse_selector(self.source)
        else:
            parsed = list(selector)
            self.source = " ".join(p.source or p.value for p in parsed)
        self.parts = [LocatorPart(part, self.adapter) for part in parsed]

    def find(self, target: Any) -> list[Any]:
        """Return every record under *target* matching the selector.

        *target* is a single record, an iterable of records, or a
        Collection. A selector with no parts returns the target records
        unchanged.
        """
        result = _as_records(target)
        if not self.parts:
            logger.debug("Empty selector; returning %d seed record(s)", len(result))
            return result

        final_index = len(self.parts) - 1
        for i, part in enumerate(self.parts):
            matches = search_matches(result, not part.direct, part.matches, self.adapter)
            logger.debug(
                "Selector %r part %d (%r): %d candidate(s), %d match(es)",
                self.source,
                i,
                part,
                len(result),
                len(matches),
            )

            if i != final_index:
                result = [
                    child for match in matches for child in self.adapter.get_children(match)
                ]
            else:
                result = matches

        return result

    def __repr__(self) -> str:
        return f"Locator({self.source!r})"


def _as_records(target: Any) -> list[Any]:
    """Normalize a seed into a flat list of records.

    Accepts a Collection or Node, any non-string iterable of records, or a
    single record.
    """
    from gquery.model import Collection, Node

    if isinstance(target, Collection):
        return target.unwrap()
    if isinstance(target, Node):
        return [target.unwrap()]
    if isinstance(target, (str, bytes, Mapping)) or not isinstance(target, Iterable):
        return [target]
    return [record.unwrap() if isinstance(record, Node) else record for record in target]
