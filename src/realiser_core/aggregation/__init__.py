"""Clause aggregation and conjunction reduction."""

from realiser_core.aggregation.aggregator import Aggregator
from realiser_core.aggregation.functional_set import FunctionalSet, head_lemma
from realiser_core.aggregation.helper import flatten, pair_constituents
from realiser_core.aggregation.rules import (
    AggregationRule,
    BackwardConjunctionReductionRule,
    ForwardConjunctionReductionRule,
)

__all__ = [
    "AggregationRule",
    "Aggregator",
    "BackwardConjunctionReductionRule",
    "ForwardConjunctionReductionRule",
    "FunctionalSet",
    "flatten",
    "head_lemma",
    "pair_constituents",
]
