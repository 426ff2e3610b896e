"""Core utilities package"""

from .config import Settings, settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    LinearAlgebraError,
    DimensionMismatchError,
    UnsupportedOperandError,
    InvalidDimensionError,
    RaggedRowsError,
    UnknownStrategyError,
)

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "LinearAlgebraError",
    "DimensionMismatchError",
    "UnsupportedOperandError",
    "InvalidDimensionError",
    "RaggedRowsError",
    "UnknownStrategyError",
]
