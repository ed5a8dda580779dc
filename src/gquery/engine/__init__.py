"""Matching engine: locators and tree search."""

from gquery.engine.locator import Locator, LocatorPart, search_matches

__all__ = [
    "Locator",
    "LocatorPart",
    "search_matches",
]
