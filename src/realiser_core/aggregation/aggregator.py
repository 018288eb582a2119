from __future__ import annotations

import logging
from collections.abc import Iterable

from realiser_core.aggregation.rules import AggregationRule
from realiser_core.framework.elements import Element

logger = logging.getLogger(__name__)


class Aggregator:
    """Applies an ordered list of rules, each to the previous rule's output."""

    def __init__(self, rules: Iterable[AggregationRule] = ()):
        self.rules: list[AggregationRule] = list(rules)

    def add_rule(self, rule: AggregationRule) -> None:
        self.rules.append(rule)

    def realise(self, elements: list[Element]) -> list[Element]:
        results = list(elements)
        for rule in self.rules:
            results = rule.apply_all(results)
        logger.debug("Aggregated %d phrases into %d", len(elements), len(results))
        return results
