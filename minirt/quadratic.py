"""Helpers for solving ``a*t^2 + b*t + c = 0`` in ray intersection tests."""

from __future__ import annotations

import math


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: a zero denominator yields inf or nan."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def discriminant(a: float, b: float, c: float) -> float:
    """Return ``b^2 - 4ac``."""
    return b * b - 4.0 * a * c


def entry_distance(a: float, b: float, disc: float) -> float:
    """Return the smaller root ``(-b - sqrt(disc)) / 2a``."""
    return _divide(-b - math.sqrt(disc), 2.0 * a)


def exit_distance(a: float, b: float, disc: float) -> float:
    """Return the larger root ``(-b + sqrt(disc)) / 2a``."""
    return _divide(-b + math.sqrt(disc), 2.0 * a)