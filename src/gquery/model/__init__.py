"""gquery model layer -- wrapped result types."""

from gquery.model.collection import Collection
from gquery.model.node import Node

__all__ = [
    "Collection",
    "Node",
]
