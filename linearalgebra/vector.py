"""
Vector: one-dimensional numeric container.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from .array import NumArray
from .core.errors import DimensionMismatchError, UnsupportedOperandError


class Vector(NumArray):
    """
    Vector of floats.

    ``dimension`` is the number of elements. Empty vectors are allowed.
    """

    data: list[float] = Field(default_factory=list)

    is_vector: ClassVar[bool] = True

    def _measure(self) -> int:
        return len(self.data)

    def scale(self, factor: float) -> Vector:
        """
        Multiply every element in place by ``factor``.

        Follows IEEE-754 semantics, so infinities and NaN propagate.

        Returns:
            self, for chaining
        """
        data = self.data
        for i in range(self._dim):
            data[i] *= factor
        return self

    def dot(self, other: Vector) -> Vector:
        """
        Element-wise (Hadamard) product with another vector.

        No reduction is performed: the result is the vector
        ``[a0*b0, a1*b1, ...]``.

        Raises:
            UnsupportedOperandError: If ``other`` is not a Vector
            DimensionMismatchError: If the vectors differ in length
        """
        if not isinstance(other, Vector):
            raise UnsupportedOperandError("Vector dot product", other)
        if self._dim != other._dim:
            raise DimensionMismatchError(
                "Vector dot product", self._dim, other._dim, "vectors to have same size"
            )

        a, b = self.data, other.data
        return type(self)([a[i] * b[i] for i in range(self._dim)])
