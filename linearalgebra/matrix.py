"""
Matrix: two-dimensional rectangular numeric container.

Multiplication reduces each output cell with the summation strategy bound
to the matrix's class. Products are always formed in ascending column order
and handed to the strategy unreordered, so results are reproducible for a
given strategy.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, ClassVar, Sequence, Union

from pydantic import Field

from .array import NumArray
from .core.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    RaggedRowsError,
    UnsupportedOperandError,
)
from .vector import Vector


def _check_side(dim: Any) -> int:
    """Validate the side length of a square structured matrix."""
    if isinstance(dim, bool) or not isinstance(dim, Integral) or dim < 1:
        raise InvalidDimensionError(
            f"Matrix size must be a positive integer (got {dim!r})",
            details={"dim": dim},
        )
    return int(dim)


class Matrix(NumArray):
    """
    Matrix of floats stored as a list of rows.

    Rows must be non-empty and of equal length; this is checked once, at
    construction.
    """

    data: list[list[float]] = Field(default_factory=list)

    is_matrix: ClassVar[bool] = True
    # Class used for matrix-vector products
    vector_type: ClassVar[type[Vector]] = Vector

    def _measure(self) -> tuple[int, int]:
        rows = self.data
        if not rows:
            raise InvalidDimensionError("Matrix requires at least one row", details={"rows": 0})

        cols = len(rows[0])
        if cols == 0:
            raise InvalidDimensionError("Matrix requires at least one column", details={"columns": 0})

        for index, row in enumerate(rows):
            if len(row) != cols:
                raise RaggedRowsError(index, cols, len(row))

        return (len(rows), cols)

    @property
    def row_count(self) -> int:
        return self._dim[0]

    @property
    def column_count(self) -> int:
        return self._dim[1]

    # Matrix operations

    def scale(self, factor: float) -> Matrix:
        """
        Multiply every element in place by ``factor``.

        Returns:
            self, for chaining
        """
        rows, cols = self._dim
        data = self.data
        for i in range(rows):
            row = data[i]
            for j in range(cols):
                row[j] *= factor
        return self

    def mul(self, arg: Union[Matrix, Vector]) -> Union[Matrix, Vector]:
        """
        Multiply this matrix by a matrix or a vector.

        Args:
            arg: Matrix with ``row_count == self.column_count``, or Vector
                with ``dimension == self.column_count``

        Returns:
            Matrix of shape (self.row_count, arg.column_count), or Vector of
            length self.row_count

        Raises:
            DimensionMismatchError: If the shapes are incompatible
            UnsupportedOperandError: If ``arg`` is neither Matrix nor Vector
        """
        add = self.summation
        rows, cols = self._dim
        a = self.data

        if isinstance(arg, Matrix):
            if cols != arg.row_count:
                raise DimensionMismatchError(
                    "Multiplying by matrix", self._dim, arg.dimension, "this.columns = matrix.rows"
                )

            b = arg.data
            out_cols = arg.column_count
            result = []
            for i in range(rows):
                row = a[i]
                result.append([add([row[j] * b[j][k] for j in range(cols)]) for k in range(out_cols)])

            return type(self)(result)

        if isinstance(arg, Vector):
            if cols != arg.dimension:
                raise DimensionMismatchError(
                    "Multiplying by vector", self._dim, arg.dimension, "this.columns = vector.size"
                )

            v = arg.data
            result = []
            for i in range(rows):
                row = a[i]
                result.append(add([row[j] * v[j] for j in range(cols)]))

            return self.vector_type(result)

        raise UnsupportedOperandError("Matrix multiplication", arg)

    def __matmul__(self, other: Any) -> Union[Matrix, Vector]:
        """Matrix product: self @ other"""
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.mul(other)

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns swapped."""
        rows, cols = self._dim
        a = self.data
        return type(self)([[a[i][j] for i in range(rows)] for j in range(cols)])

    # Structured constructors

    @classmethod
    def identity(cls, dim: int) -> Matrix:
        """
        Create a ``dim x dim`` identity matrix.

        Raises:
            InvalidDimensionError: If ``dim`` is not a positive integer
        """
        return cls.scalar(dim, 1)

    @classmethod
    def diagonal(cls, entries: Sequence[float]) -> Matrix:
        """
        Create a square matrix with ``entries`` on the diagonal, zero elsewhere.

        Raises:
            InvalidDimensionError: If ``entries`` is empty
        """
        entries = list(entries)
        dim = len(entries)
        if dim == 0:
            raise InvalidDimensionError("Diagonal matrix requires at least one entry", details={"dim": 0})

        a = [[0.0] * dim for _ in range(dim)]
        for i in range(dim):
            a[i][i] = entries[i]
        return cls(a)

    @classmethod
    def scalar(cls, dim: int, entry: float) -> Matrix:
        """
        Create a ``dim x dim`` matrix with ``entry`` on every diagonal position.

        Raises:
            InvalidDimensionError: If ``dim`` is not a positive integer
        """
        dim = _check_side(dim)

        a = [[0.0] * dim for _ in range(dim)]
        for i in range(dim):
            a[i][i] = entry
        return cls(a)
