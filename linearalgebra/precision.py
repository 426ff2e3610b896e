"""
Precision build.

Same API as the package top level, with ``Vector`` and ``Matrix`` bound to
the compensated summation strategy named by ``settings.PRECISION_SUMMATION``
(Neumaier summation unless configured otherwise).

    from linearalgebra.precision import Matrix, Vector
"""

from .core.config import settings
from .library import LinearAlgebra, linear_algebra

library: LinearAlgebra = linear_algebra(settings.PRECISION_SUMMATION)

Vector = library.Vector
Matrix = library.Matrix

__all__ = ["library", "Vector", "Matrix"]
