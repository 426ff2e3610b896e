"""
Base NumArray class shared by Vector and Matrix.

A NumArray owns a numeric buffer (flat for vectors, nested for matrices)
and the dimension measured from it at construction time. The dimension is
never recomputed: operations may change element values in place but never
the shape.
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterator

import numpy as np
from pydantic import BaseModel, PrivateAttr, field_validator

from .core.config import settings
from .summation import SummationStrategy, naive_sum


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| <= tol * |b|
    ABSOLUTE = "absolute"  # |a - b| <= tol


class NumArray(BaseModel):
    """
    Numeric storage with size and raw-data accessors.

    Not meant to be instantiated directly; subclasses declare the shape of
    ``data`` and how to measure it.

    ``summation`` is the strategy used by reductions on this class. Library
    instances bind it on generated subclasses; the base classes use naive
    left-to-right summation.
    """

    data: Any = None

    summation: ClassVar[SummationStrategy] = staticmethod(naive_sum)
    is_vector: ClassVar[bool] = False
    is_matrix: ClassVar[bool] = False

    _dim: Any = PrivateAttr(default=None)

    def __init__(self, data: Any, **kwargs: Any) -> None:
        super().__init__(data=data, **kwargs)
        self._dim = self._measure()

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, value: Any) -> Any:
        if isinstance(value, np.ndarray):
            return value.tolist()
        if isinstance(value, (list, tuple)):
            value = [row.tolist() if isinstance(row, np.ndarray) else row for row in value]
            for item in value:
                cells = item if isinstance(item, (list, tuple)) else (item,)
                for cell in cells:
                    # lax float coercion would accept these
                    if isinstance(cell, (str, bytes, bool)):
                        raise ValueError(f"Expected a number, got {type(cell).__name__} {cell!r}")
        return value

    def _measure(self) -> Any:
        """Compute the dimension from ``data``; raise if the shape is unusable."""
        raise NotImplementedError(f"{self.__class__.__name__}._measure() not implemented")

    # Accessors

    @property
    def dimension(self) -> Any:
        """Shape descriptor: an int for vectors, (rows, cols) for matrices."""
        return self._dim

    def size(self) -> Any:
        """Return the dimension as stored at construction."""
        return self._dim

    def raw_data(self) -> Any:
        """
        Return the underlying storage (not a copy).

        Mutating the returned buffer bypasses the shape invariant; keeping it
        rectangular is the caller's responsibility.
        """
        return self.data

    # Conversions

    def to_python(self) -> Any:
        """Return a deep copy of the data as plain nested lists."""
        return self.to_numpy().tolist()

    def to_numpy(self) -> np.ndarray:
        """Convert to a float64 NumPy array."""
        return np.array(self.data, dtype=np.float64)

    def compare(
        self, other: NumArray, tolerance: float | None = None, mode: str = ToleranceMode.RELATIVE
    ) -> bool:
        """
        Element-wise fuzzy comparison.

        Arrays of a different kind or shape never compare equal. NaNs in the
        same position are treated as equal.
        """
        if not isinstance(other, NumArray):
            return False
        if self.is_vector != other.is_vector or self.is_matrix != other.is_matrix:
            return False
        if self.dimension != other.dimension:
            return False

        if tolerance is None:
            tolerance = settings.COMPARE_TOLERANCE

        if mode == ToleranceMode.ABSOLUTE:
            rtol, atol = 0.0, tolerance
        elif mode == ToleranceMode.RELATIVE:
            rtol, atol = tolerance, 0.0
        else:
            raise ValueError(f"Unknown tolerance mode '{mode}'")

        return bool(np.allclose(self.to_numpy(), other.to_numpy(), rtol=rtol, atol=atol, equal_nan=True))

    # Python protocol

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> Any:
        return self.data[index]

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.data)

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.data!r})"
