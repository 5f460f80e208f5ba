"""
Generic result container for PyLinear computations.

The Result class provides a standardized envelope around a backend's
parameter payload. It carries timing, provenance and non-fatal warnings
alongside the parameters so a fitted model can be audited after the fact.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, denominator)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library and interpreter versions active when the result was made."""
    from pylinear import __version__

    return {
        'pylinear_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a fit.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (slope, intercept, sums)
        info: Structured metadata (method, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions of the software that produced the result

    Examples:
        >>> Result(
        ...     params=LinearParams(...),
        ...     info={'method': 'closed_form', 'denominator': 6.0},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_closed_form'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)
