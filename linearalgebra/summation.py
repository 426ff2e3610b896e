"""
Summation strategies.

A summation strategy reduces an ordered, non-empty sequence of floats to a
single float. Matrix multiplication calls the strategy once per output cell,
so swapping strategies trades speed for precision without touching the
multiplication loops.

Strategies must be pure and reentrant: no state survives between calls.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence, Union

import numpy as np

from .core.config import settings
from .core.errors import UnknownStrategyError

SummationStrategy = Callable[[Sequence[float]], float]


def naive_sum(values: Sequence[float]) -> float:
    """
    Left-to-right accumulation: ((a0 + a1) + a2) + ...

    Starts from the first element rather than from zero, so a lone ``-0.0``
    is returned unchanged.
    """
    total = values[0]
    for i in range(1, len(values)):
        total += values[i]
    return total


def kahan_sum(values: Sequence[float]) -> float:
    """
    Kahan compensated summation.

    Tracks the low-order bits lost by each addition in a running
    compensation term. Once the running total is no longer finite the
    compensation is dropped, so infinities and NaN propagate as they do
    under naive summation.
    """
    total = values[0]
    compensation = 0.0
    for i in range(1, len(values)):
        y = values[i] - compensation
        t = total + y
        if math.isfinite(t):
            compensation = (t - total) - y
        else:
            compensation = 0.0
        total = t
    return total


def neumaier_sum(values: Sequence[float]) -> float:
    """
    Kahan-Babuska (Neumaier) compensated summation.

    Unlike classic Kahan, the compensation also captures the error when the
    incoming term is larger in magnitude than the running total, which keeps
    cancellation-heavy inputs such as ``[1e16, 1.0, -1e16]`` exact.
    A non-finite total is returned as is.
    """
    total = values[0]
    compensation = 0.0
    for i in range(1, len(values)):
        x = values[i]
        t = total + x
        if math.isfinite(t):
            if abs(total) >= abs(x):
                compensation += (total - t) + x
            else:
                compensation += (x - t) + total
        total = t
    if not math.isfinite(total):
        return total
    return total + compensation


def pairwise_sum(values: Sequence[float]) -> float:
    """Pairwise (cascade) summation via numpy's float64 reduction."""
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.sum(np.asarray(values, dtype=np.float64)))


def exact_sum(values: Sequence[float]) -> float:
    """
    Correctly rounded sum (Shewchuk's algorithm, ``math.fsum``).

    ``math.fsum`` raises on intermediate overflow and on ``inf + -inf``;
    those sums fall back to naive IEEE-754 accumulation instead.
    """
    try:
        return math.fsum(values)
    except (OverflowError, ValueError):
        return naive_sum(values)


STRATEGIES: dict[str, SummationStrategy] = {
    "naive": naive_sum,
    "kahan": kahan_sum,
    "neumaier": neumaier_sum,
    "pairwise": pairwise_sum,
    "exact": exact_sum,
}


def get_strategy(strategy: Union[str, SummationStrategy, None] = None) -> SummationStrategy:
    """
    Resolve a summation strategy.

    Args:
        strategy: A callable (returned unchanged), a registered name, or
            None for the configured default (``settings.SUMMATION``).

    Returns:
        The summation function

    Raises:
        UnknownStrategyError: If the name is not registered
    """
    if strategy is None:
        strategy = settings.SUMMATION

    if callable(strategy):
        return strategy

    try:
        return STRATEGIES[strategy]
    except KeyError:
        raise UnknownStrategyError(strategy, sorted(STRATEGIES)) from None


def strategy_name(strategy: SummationStrategy) -> str:
    """Registered name of a strategy, or its qualified name for custom ones."""
    for name, func in STRATEGIES.items():
        if func is strategy:
            return name
    return getattr(strategy, "__qualname__", type(strategy).__name__)
