"""
Library instantiation.

``linear_algebra(add)`` returns a namespace whose ``Vector`` and ``Matrix``
types are bound to one summation strategy. Each call creates fresh types,
so instances with different strategies coexist without shared state.
"""

from __future__ import annotations

from typing import Union

from .core.logging import get_context_logger
from .matrix import Matrix as BaseMatrix
from .summation import SummationStrategy, get_strategy, strategy_name
from .vector import Vector as BaseVector


class LinearAlgebra:
    """
    Vector and Matrix types sharing one summation strategy.

    Attributes:
        Vector: Vector subclass bound to ``summation``
        Matrix: Matrix subclass bound to ``summation``; its matrix-vector
            products return this namespace's ``Vector``
        summation: The strategy used by every reduction
        name: Registered name of the strategy (or its qualified name)
        logger: Logger adapter carrying the strategy name as context
    """

    def __init__(self, add: Union[str, SummationStrategy, None] = None):
        add = get_strategy(add)

        class Vector(BaseVector):
            summation = staticmethod(add)

        class Matrix(BaseMatrix):
            summation = staticmethod(add)
            vector_type = Vector

        self.Vector = Vector
        self.Matrix = Matrix
        self.summation = add
        self.name = strategy_name(add)

        self.logger = get_context_logger(__name__, summation=self.name)
        self.logger.debug("Linear algebra library created (summation=%s)", self.name)

    def __repr__(self) -> str:
        return f"LinearAlgebra(summation={self.name!r})"


def linear_algebra(add: Union[str, SummationStrategy, None] = None) -> LinearAlgebra:
    """
    Initialise the linear algebra library.

    Args:
        add: Summation strategy: a function reducing a sequence of floats to
            one float, a registered strategy name ("naive", "kahan",
            "neumaier", "pairwise", "exact"), or None for the configured
            default (naive unless ``LINALG_SUMMATION`` says otherwise).

    Returns:
        LinearAlgebra namespace exposing ``Vector`` and ``Matrix``

    Example:
        >>> la = linear_algebra("neumaier")
        >>> la.Matrix([[1, 2], [3, 4]]).mul(la.Vector([5, 6])).data
        [17.0, 39.0]
    """
    return LinearAlgebra(add)
