"""
Aggregation rules.

A rule tries to merge two phrases into one. Failing to merge is the normal
outcome when the phrases do not line up, so `apply` returns None rather than
raising; callers try several rules and keep the phrases apart when none fits.
Rules never mutate their inputs: merged output is built from copies.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from realiser_core.aggregation.helper import pair_constituents
from realiser_core.framework.categories import DiscourseFunction, Periphery, PhraseCategory
from realiser_core.framework.elements import CoordinatedPhrase, Element
from realiser_core.framework.factory import coordinate
from realiser_core.settings import get_settings

logger = logging.getLogger(__name__)


class AggregationRule(ABC):
    """
    Base class for pairwise merging rules.

    Args:
        conjunction: Word joining merged phrases; the configured
            `default_conjunction` when omitted.
    """

    def __init__(self, conjunction: Optional[str] = None):
        self.conjunction = conjunction or get_settings().default_conjunction

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def apply(self, first: Element, second: Element) -> Optional[Element]:
        """Merge two phrases, or return None if this rule does not apply."""

    def apply_all(self, phrases: list[Element]) -> list[Element]:
        """
        Greedily merge a list of phrases.

        Each surviving phrase absorbs every later phrase the rule can merge
        with it; absorbed phrases drop out of the result. A lone coordinated
        phrase is aggregated over its own coordinates.

        Args:
            phrases: Phrases in surface order.

        Returns:
            The aggregated phrases, in order.
        """
        if len(phrases) == 1:
            return [self.apply_single(phrases[0])]

        results: list[Element] = []
        absorbed: list[Element] = []
        for i, phrase in enumerate(phrases):
            if any(phrase is seen for seen in absorbed):
                continue
            current = phrase
            for following in phrases[i + 1 :]:
                merged = self.apply(current, following)
                if merged is not None:
                    current = merged
                    absorbed.append(following)
            results.append(current)

        logger.debug("%s: %d phrases -> %d", self.name, len(phrases), len(results))
        return results

    def apply_single(self, phrase: Element) -> Element:
        """Aggregate the coordinates of a coordinated phrase; pass anything else through."""
        if not isinstance(phrase, CoordinatedPhrase):
            return phrase
        coordinates = [
            child
            for child in phrase.coordinates
            if child.function is not DiscourseFunction.CONJUNCTION
        ]
        if len(coordinates) < 2:
            return phrase
        aggregated = self.apply_all(coordinates)
        if len(aggregated) == 1:
            return aggregated[0]
        return coordinate(*aggregated, conjunction=phrase.conjunction, category=phrase.category)


class _ConjunctionReductionRule(AggregationRule):
    """Shared body of the forward and backward reduction rules."""

    periphery: Periphery
    functions: frozenset[DiscourseFunction]

    def _elide(self, pair) -> None:
        raise NotImplementedError

    def apply(self, first: Element, second: Element) -> Optional[Element]:
        if first.category is not PhraseCategory.CLAUSE or second.category is not PhraseCategory.CLAUSE:
            return None
        if first.passive or second.passive:
            return None

        first, second = first.copy(), second.copy()
        reduced = False
        for pair in pair_constituents(first, second):
            if pair.periphery is not self.periphery or pair.function not in self.functions:
                continue
            if pair.lemma_identical():
                self._elide(pair)
                reduced = True

        if not reduced:
            return None
        logger.debug("%s merged two clauses", self.name)
        return coordinate(first, second, conjunction=self.conjunction, category=PhraseCategory.CLAUSE)


class ForwardConjunctionReductionRule(_ConjunctionReductionRule):
    """
    Elide repeated material before the verb from the second clause.

    "John came in and John sat down" -> "John came in and sat down"
    """

    periphery = Periphery.LEFT
    functions = frozenset(
        {DiscourseFunction.CUE_PHRASE, DiscourseFunction.FRONT_MODIFIER, DiscourseFunction.SUBJECT}
    )

    def _elide(self, pair) -> None:
        pair.elide_rightmost()


class BackwardConjunctionReductionRule(_ConjunctionReductionRule):
    """
    Elide repeated material after the verb from the first clause.

    "John bought the wine and Mary drank the wine" -> "John bought and Mary drank the wine"
    """

    periphery = Periphery.RIGHT
    functions = frozenset(
        {DiscourseFunction.OBJECT, DiscourseFunction.COMPLEMENT, DiscourseFunction.POST_MODIFIER}
    )

    def _elide(self, pair) -> None:
        pair.elide_leftmost()
