"""
Functional entry point for simple linear regression.

This module provides fit() (public API), a one-call alternative to
constructing a LinearModel and fitting it.
"""

from numpy.typing import ArrayLike

from pylinear.regression.backends import BackendChoice
from pylinear.regression.model import LinearModel


def fit(
    x: ArrayLike,
    y: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> LinearModel:
    """
    Fit a simple linear regression model.

    Solves the ordinary least squares problem:
        min_(a, b) Σ (y_i - a - b x_i)²

    Args:
        x: Predictor values (n,). Can be any array-like.
        y: Response values (n,). Can be any array-like.
        backend: Computational backend to use:
            - 'auto': Select best available (currently 'cpu')
            - 'cpu': Vectorized NumPy sums
            - 'sequential' / 'reference': Single in-order pass

    Returns:
        A fitted LinearModel

    Raises:
        ValueError: If unknown backend specified
        LengthMismatchError: If x and y have different lengths
        InsufficientDataError: If fewer than two observations
        DegenerateInputError: If all x values are identical
        ValidationError: If inputs are non-numeric or non-finite

    Example:
        >>> from pylinear.regression import fit
        >>> model = fit([1, 2, 3], [5, 6, 7])
        >>> model.predict([4.0])
        array([8.])
        >>> print(model.solution.summary())
    """
    return LinearModel(backend=backend).fit(x, y)
