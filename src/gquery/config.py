from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

logger = logging.getLogger(__name__)

Accessor = Union[Callable[[Any], Any], str]

# Option keys as callers spell them; "class" maps onto the class_ field.
OPTION_KEYS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "class": "class_",
    "children": "children",
}


@dataclass(frozen=True)
class AdapterOptions:
    id: Accessor | None = None
    name: Accessor | None = None
    class_: Accessor | None = None
    children: Accessor | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> AdapterOptions:
        """Build options from a ``{"id": ..., "class": ...}`` style mapping.

        Unrecognized keys are ignored.
        """
        if not options:
            return cls()
        ignored = [key for key in options if key not in OPTION_KEYS]
        if ignored:
            logger.debug("Ignoring unrecognized adapter options: %s", ", ".join(ignored))
        kwargs = {
            field_name: options[key]
            for key, field_name in OPTION_KEYS.items()
            if options.get(key) is not None
        }
        return cls(**kwargs)
