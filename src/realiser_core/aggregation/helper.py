"""Constituent flattening and pairing for ellipsis rules."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from realiser_core.aggregation.functional_set import FunctionalSet
from realiser_core.framework.categories import (
    DiscourseFunction,
    LexicalCategory,
    Periphery,
    PhraseCategory,
)
from realiser_core.framework.elements import Element

logger = logging.getLogger(__name__)


def _is_verb_phrase(element: Element) -> bool:
    return (
        element.category is PhraseCategory.VERB_PHRASE
        or element.function is DiscourseFunction.VERB_PHRASE
    )


def flatten(element: Element) -> Iterator[Element]:
    """
    Walk `element`'s constituents, splicing verb phrases open in place.

    Each verb phrase is yielded itself and then followed by its own
    (flattened) constituents, so arguments inside it line up with the
    clause's top-level arguments.
    """
    for child in element.children:
        yield child
        if _is_verb_phrase(child):
            yield from flatten(child)


def pair_constituents(first: Element, second: Element) -> list[FunctionalSet]:
    """
    Pair corresponding constituents of two parallel phrases.

    Returns:
        One set per position, tagged LEFT up to and including the verb and
        RIGHT after it; an empty list if the phrases differ in length or in
        the category or function at any position.
    """
    left = list(flatten(first))
    right = list(flatten(second))
    if len(left) != len(right):
        logger.debug("Cannot pair constituents: %d vs %d", len(left), len(right))
        return []

    pairs: list[FunctionalSet] = []
    periphery = Periphery.LEFT
    for position, (a, b) in enumerate(zip(left, right)):
        if a.category is not b.category or a.function is not b.function:
            logger.debug("Constituent mismatch at position %d", position)
            return []
        pair = FunctionalSet.new_instance(a.function, a.category, periphery, a, b)
        if pair is not None:
            pairs.append(pair)
        if a.category is LexicalCategory.VERB:
            periphery = Periphery.RIGHT
    return pairs
