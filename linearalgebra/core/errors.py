"""
Library exceptions.

Every failure is raised synchronously at the offending call, before any
output is produced. Each exception carries a human-readable message and a
``details`` dict describing the violated constraint.
"""

from typing import Any, Dict, Optional


class LinearAlgebraError(Exception):
    """Base exception for linear algebra errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DimensionMismatchError(LinearAlgebraError, ValueError):
    """Raised when operand shapes are incompatible for an operation"""

    def __init__(self, operation: str, left: Any, right: Any, constraint: str):
        super().__init__(
            message=f"{operation} requires {constraint} (got {left} and {right})",
            details={"operation": operation, "left": left, "right": right},
        )


class UnsupportedOperandError(LinearAlgebraError, TypeError):
    """Raised when an operand is neither a matrix nor a vector"""

    def __init__(self, operation: str, operand: Any):
        type_name = type(operand).__name__
        super().__init__(
            message=f"{operation} does not support operand of type '{type_name}'",
            details={"operation": operation, "operand_type": type_name},
        )


class InvalidDimensionError(LinearAlgebraError, ValueError):
    """Raised when a size argument or a data shape is not usable"""


class RaggedRowsError(InvalidDimensionError):
    """Raised when matrix rows have differing lengths"""

    def __init__(self, row: int, expected: int, actual: int):
        super().__init__(
            message=f"Matrix rows must all have length {expected} (row {row} has {actual})",
            details={"row": row, "expected": expected, "actual": actual},
        )


class UnknownStrategyError(LinearAlgebraError, LookupError):
    """Raised when a summation strategy name is not registered"""

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            message=f"Unknown summation strategy '{name}'",
            details={"name": name, "available": available},
        )
