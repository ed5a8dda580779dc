from gquery.selector.parser import parse_selector
from gquery.selector.model import Condition, Kind, SelectorPart

__all__ = ["parse_selector", "Condition", "Kind", "SelectorPart"]
