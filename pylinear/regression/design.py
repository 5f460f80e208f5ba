"""
Simple regression design.

A design is the validated (x, y) pair a backend is allowed to trust.
All input checking happens while building it; nothing downstream
re-validates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.validation import (
    check_array,
    check_1d,
    check_consistent_length,
    check_min_samples,
    check_finite,
    check_not_constant,
)

# Two parameters (slope, intercept) need at least two points
MIN_SAMPLES = 2


@dataclass(frozen=True)
class SufficientStats:
    """The four sums the closed-form estimator needs, plus n."""
    n: int
    sum_x: float
    sum_y: float
    sum_xx: float
    sum_xy: float


@dataclass(frozen=True)
class SimpleDesign:
    """
    Validated single-predictor regression data.

    Immutable after construction.

    Construction:
        SimpleDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> SimpleDesign:
        """
        Build a design from array-likes.

        Checks run in a fixed order: conversion, dimensionality, matching
        lengths, minimum sample count, finiteness, then predictor variance.

        Raises:
            ValidationError: Non-numeric or non-finite input
            DimensionError: Input is not 1-dimensional
            LengthMismatchError: len(x) != len(y)
            InsufficientDataError: Fewer than two observations
            DegenerateInputError: All x values identical
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')

        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, MIN_SAMPLES, 'x')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        check_not_constant(x_arr, 'x')

        # Private copies so later mutation of caller arrays can't leak in
        x_arr = np.array(x_arr, dtype=np.float64)
        y_arr = np.array(y_arr, dtype=np.float64)
        x_arr.flags.writeable = False
        y_arr.flags.writeable = False

        return cls(_x=x_arr, _y=y_arr, _n=x_arr.shape[0])

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    def sums(self) -> SufficientStats:
        """Compute Σx, Σy, Σx², Σxy with vectorized reductions."""
        x, y = self._x, self._y
        return SufficientStats(
            n=self._n,
            sum_x=float(np.sum(x)),
            sum_y=float(np.sum(y)),
            sum_xx=float(np.sum(x * x)),
            sum_xy=float(np.sum(x * y)),
        )
