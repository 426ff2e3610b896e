"""
linearalgebra - dense vector and matrix arithmetic with pluggable summation

Provides:
- Vector and Matrix value types on a shared NumArray base
- Scale, element-wise dot, matrix-matrix and matrix-vector products, transpose
- Identity, diagonal and scalar matrix constructors
- Summation strategies (naive, Kahan, Neumaier, pairwise, exact) injected
  once per library instance via ``linear_algebra(add)``

The top-level ``Vector`` and ``Matrix`` are the default build and use naive
left-to-right summation. ``linearalgebra.precision`` is the precision build.
"""

from .array import NumArray, ToleranceMode
from .core.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    LinearAlgebraError,
    RaggedRowsError,
    UnknownStrategyError,
    UnsupportedOperandError,
)
from .library import LinearAlgebra, linear_algebra
from .matrix import Matrix
from .summation import (
    STRATEGIES,
    SummationStrategy,
    exact_sum,
    get_strategy,
    kahan_sum,
    naive_sum,
    neumaier_sum,
    pairwise_sum,
)
from .vector import Vector

__version__ = "0.1.0"

__all__ = [
    "NumArray",
    "ToleranceMode",
    "Vector",
    "Matrix",
    "LinearAlgebra",
    "linear_algebra",
    "SummationStrategy",
    "STRATEGIES",
    "get_strategy",
    "naive_sum",
    "kahan_sum",
    "neumaier_sum",
    "pairwise_sum",
    "exact_sum",
    "LinearAlgebraError",
    "DimensionMismatchError",
    "UnsupportedOperandError",
    "InvalidDimensionError",
    "RaggedRowsError",
    "UnknownStrategyError",
]
