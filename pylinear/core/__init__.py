"""
Core infrastructure for PyLinear.

This module provides shared abstractions and utilities used by the
regression subpackage.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pylinear.core.protocols import Backend
from pylinear.core.result import Result
from pylinear.core.exceptions import (
    PyLinearError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    InsufficientDataError,
    DegenerateInputError,
    ModelStateError,
    AlreadyFittedError,
    NotFittedError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinearError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "InsufficientDataError",
    "DegenerateInputError",
    "ModelStateError",
    "AlreadyFittedError",
    "NotFittedError",
]
