"""Set-theoretic operations over fuzzy sets (label → membership degree).

Independent of the evaluator. A label missing from one operand counts as
membership 0.0 in that operand.
"""

from __future__ import annotations

from typing import Callable

from . import constants

FuzzySet = dict[str, float]


def _combine(set_a: FuzzySet, set_b: FuzzySet, fn: Callable[[float, float], float]) -> FuzzySet:
    missing = constants.FUZZY_SET_MISSING_DEGREE
    labels = list(dict.fromkeys([*set_a, *set_b]))
    return {
        label: fn(set_a.get(label, missing), set_b.get(label, missing))
        for label in labels
    }


def union(set_a: FuzzySet, set_b: FuzzySet) -> FuzzySet:
    return _combine(set_a, set_b, max)


def intersection(set_a: FuzzySet, set_b: FuzzySet) -> FuzzySet:
    return _combine(set_a, set_b, min)


def complement(set_a: FuzzySet) -> FuzzySet:
    return {label: constants.FUZZY_SET_MAX_DEGREE - degree for label, degree in set_a.items()}


def bounded_sum(set_a: FuzzySet, set_b: FuzzySet) -> FuzzySet:
    """Pointwise sum capped at full membership."""
    return _combine(set_a, set_b, lambda a, b: min(constants.FUZZY_SET_MAX_DEGREE, a + b))


def product(set_a: FuzzySet, set_b: FuzzySet) -> FuzzySet:
    return _combine(set_a, set_b, lambda a, b: a * b)


class FuzzySetOperations:
    """Table of binary fuzzy set operations by name."""

    TABLE: dict[str, Callable[[FuzzySet, FuzzySet], FuzzySet]] = {
        "union": union,
        "intersection": intersection,
        "bounded_sum": bounded_sum,
        "product": product,
    }
