"""
Regression backends.

Available backends:
    CPUClosedFormBackend: Vectorized NumPy sums, closed-form solve
    SequentialBackend: Single in-order pass, closed-form solve
"""

from typing import Literal

from pylinear.regression.backends.cpu import CPUClosedFormBackend
from pylinear.regression.backends.reference import SequentialBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'sequential', 'reference']

BACKEND_CHOICES: tuple[str, ...] = ('auto', 'cpu', 'sequential', 'reference')


def select_backend(choice: BackendChoice = 'auto'):
    """
    Instantiate the backend for a user-facing choice.

    Args:
        choice: 'auto' or 'cpu' for the vectorized backend,
            'sequential' or 'reference' for the single-pass backend

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUClosedFormBackend()

    elif choice in ('sequential', 'reference'):
        return SequentialBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")


__all__ = [
    "BackendChoice",
    "BACKEND_CHOICES",
    "CPUClosedFormBackend",
    "SequentialBackend",
    "select_backend",
]
