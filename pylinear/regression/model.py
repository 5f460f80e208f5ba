"""
Stateful simple linear regression model.

A LinearModel starts unfit, is fitted exactly once, and from then on only
serves predictions:

    Unfit --fit()--> Fit

The fitted parameters live in a single optional payload, so slope and
intercept are either both unset or both set.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.exceptions import AlreadyFittedError, NotFittedError
from pylinear.core.result import Result
from pylinear.core.validation import check_array, check_1d
from pylinear.regression.design import SimpleDesign
from pylinear.regression.solution import LinearParams, LinearSolution
from pylinear.regression.backends import BackendChoice, select_backend


class LinearModel:
    """
    Ordinary least squares fit of y = slope * x + intercept.

    Example:
        >>> model = LinearModel()
        >>> model.fit([1.0, 2.0, 3.0], [5.0, 6.0, 7.0])
        LinearModel(slope=1, intercept=4)
        >>> model.predict([4.0])
        array([8.])
    """

    def __init__(self, *, backend: BackendChoice = 'auto'):
        """
        Create an unfit model.

        Args:
            backend: Computational backend used by fit()
                ('auto', 'cpu', 'sequential' or 'reference')

        Raises:
            ValueError: If unknown backend specified
        """
        self._backend = select_backend(backend)
        self._result: Result[LinearParams] | None = None
        self._design: SimpleDesign | None = None

    # === State ===

    @property
    def is_fitted(self) -> bool:
        return self._result is not None

    @property
    def slope(self) -> float | None:
        """Fitted slope, or None while unfit."""
        if self._result is None:
            return None
        return self._result.params.slope

    @property
    def intercept(self) -> float | None:
        """Fitted intercept, or None while unfit."""
        if self._result is None:
            return None
        return self._result.params.intercept

    @property
    def result(self) -> Result[LinearParams]:
        """The backend Result envelope (timing, provenance, info)."""
        return self._require_fitted('result')

    @property
    def solution(self) -> LinearSolution:
        """Goodness-of-fit diagnostics for the fitted line."""
        result = self._require_fitted('solution')
        return LinearSolution(_result=result, _design=self._design)

    def _require_fitted(self, operation: str) -> Result[LinearParams]:
        if self._result is None:
            raise NotFittedError(
                f"{operation}: model must be fitted first; call fit(x, y)"
            )
        return self._result

    # === Operations ===

    def fit(self, x: ArrayLike, y: ArrayLike) -> LinearModel:
        """
        Estimate slope and intercept by closed-form OLS.

        Args:
            x: Predictor values, 1D, at least two, not all equal
            y: Response values, same length as x

        Returns:
            self, now in the fitted state

        Raises:
            AlreadyFittedError: If the model was already fitted
            LengthMismatchError: If len(x) != len(y)
            InsufficientDataError: If fewer than two observations
            DegenerateInputError: If all x values are identical
            ValidationError: If inputs are non-numeric or non-finite

        Nothing is assigned until every check has passed and the
        computation has finished, so a failed fit leaves the model unfit.
        """
        if self._result is not None:
            raise AlreadyFittedError(
                "fit: model is already fitted; create a new LinearModel to refit"
            )

        design = SimpleDesign.from_arrays(x, y)
        result = self._backend.solve(design)

        self._design = design
        self._result = result
        return self

    def predict(self, values: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Evaluate intercept + slope * value for each input.

        Args:
            values: 1D array-like of predictor values (may be empty)

        Returns:
            float64 array with one prediction per input, in input order

        Raises:
            NotFittedError: If the model has not been fitted
            ValidationError: If values are non-numeric
            DimensionError: If values is not 1D
        """
        params = self._require_fitted('predict').params

        arr = check_array(values, 'values')
        check_1d(arr, 'values')

        return params.intercept + params.slope * arr

    def __repr__(self) -> str:
        if self._result is None:
            return "LinearModel(unfit)"
        return f"LinearModel(slope={self.slope:.6g}, intercept={self.intercept:.6g})"
