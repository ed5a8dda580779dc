"""Lark-based parser turning selector strings into SelectorPart lists.

Syntax example:
    #foo .bar baz
    foo > bar
    .bar[attr="4"]
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from gquery.errors import ParseError, RedundantCombinatorError, SelectorSyntaxError
from gquery.selector.model import Condition, Kind, SelectorPart

__all__ = ["parse_selector"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_SIGILS: dict[str, Kind] = {
    "#": Kind.ID,
    ".": Kind.CLASS,
}

# Splits the body of a PART token into its base value and optional condition.
_PART_RE = re.compile(
    r"""
    (?P<value>[A-Za-z0-9_-]+)           # id, class, or name
    (?:\[
        (?P<property>[A-Za-z0-9_]+)     # attribute name
        ="(?P<literal>[^"]*)"           # quoted literal
    \])?
    """,
    re.VERBOSE,
)


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform the flat token tree into an ordered list of SelectorParts."""

    def __init__(self, selector: str) -> None:
        super().__init__()
        self.selector = selector

    def start(self, items: list[Token]) -> list[SelectorPart]:
        parts: list[SelectorPart] = []
        direct = False

        for token in items:
            if token.type == "DIRECT":
                if direct:
                    raise RedundantCombinatorError(
                        'Encountered redundant "direct descendant" (>) selector '
                        f"at {token.start_pos}",
                        line=token.line,
                        column=token.column,
                        selector=self.selector,
                        offset=token.start_pos,
                    )
                direct = True
                continue

            parts.append(_build_part(str(token), direct))
            direct = False

        # A trailing ">" has nothing to apply to and is dropped.
        return parts


def _build_part(source: str, direct: bool) -> SelectorPart:
    """Classify a PART token by sigil and split off its condition."""
    kind = _SIGILS.get(source[0], Kind.NAME)
    body = source if kind is Kind.NAME else source[1:]

    match = _PART_RE.fullmatch(body)
    if match is None:  # pragma: no cover - the grammar guarantees the shape
        raise SelectorSyntaxError(f"Malformed selector part: {source!r}", selector=source)

    condition = None
    if match.group("property") is not None:
        condition = Condition(property=match.group("property"), value=match.group("literal"))

    return SelectorPart(
        kind=kind,
        value=match.group("value"),
        direct=direct,
        condition=condition,
        source=source,
    )


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_selector(selector: str | None) -> list[SelectorPart]:
    """Parse a selector string into an ordered list of SelectorParts.

    An empty (or whitespace-only) selector yields an empty list.
    """
    selector = selector or ""
    try:
        tree = _parser().parse(selector)
    except UnexpectedInput as e:
        raise SelectorSyntaxError(
            f"Invalid selector {selector!r}: {e}",
            line=getattr(e, "line", None),
            column=getattr(e, "column", None),
            selector=selector,
            offset=getattr(e, "pos_in_stream", None),
        ) from e

    try:
        parts = SelectorTransformer(selector).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise

    logger.debug("Parsed selector %r into %d part(s)", selector, len(parts))
    return parts
