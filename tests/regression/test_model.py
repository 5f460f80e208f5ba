"""
Tests for the LinearModel lifecycle.

Covers the Unfit -> Fit state machine, the error raised for each misuse,
and the predict contract (length, order, purity).
"""

import numpy as np
import pytest

from pylinear.regression import LinearModel
from pylinear.core.exceptions import (
    AlreadyFittedError,
    DegenerateInputError,
    DimensionError,
    InsufficientDataError,
    LengthMismatchError,
    ModelStateError,
    NotFittedError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction and state
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:
    """A new model is unfit."""

    def test_new_model_is_unfit(self):
        model = LinearModel()
        assert not model.is_fitted
        assert model.slope is None
        assert model.intercept is None

    def test_repr_unfit(self):
        assert repr(LinearModel()) == "LinearModel(unfit)"

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            LinearModel(backend='gpu')

    @pytest.mark.parametrize("backend", ['auto', 'cpu', 'sequential', 'reference'])
    def test_known_backends_accepted(self, backend):
        assert not LinearModel(backend=backend).is_fitted


class TestFitTransition:
    """fit() moves the model to the fitted state exactly once."""

    def test_fit_sets_both_parameters(self, line_data):
        x, y = line_data
        model = LinearModel()
        model.fit(x, y)
        assert model.is_fitted
        assert model.slope is not None
        assert model.intercept is not None

    def test_fit_returns_self(self, line_data):
        x, y = line_data
        model = LinearModel()
        assert model.fit(x, y) is model

    def test_exact_line_parameters(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        assert model.slope == 1.0
        assert model.intercept == 4.0

    def test_repr_fitted(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        assert repr(model) == "LinearModel(slope=1, intercept=4)"

    def test_parameters_are_read_only(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        with pytest.raises(AttributeError):
            model.slope = 3.0
        with pytest.raises(AttributeError):
            model.intercept = 3.0

    def test_accepts_numpy_arrays(self, noisy_line_data):
        x, y, _, _ = noisy_line_data
        model = LinearModel().fit(x, y)
        assert model.is_fitted

    def test_accepts_integer_input(self):
        model = LinearModel().fit([1, 2, 3], [5, 6, 7])
        assert model.slope == 1.0
        assert model.intercept == 4.0

    def test_later_caller_mutation_does_not_change_model(self):
        x = np.array([1.0, 2.0, 3.0])
        y = np.array([5.0, 6.0, 7.0])
        model = LinearModel().fit(x, y)
        x[:] = 0.0
        y[:] = 0.0
        assert model.solution.rss == 0.0
        np.testing.assert_array_equal(model.solution.fitted_values, [5.0, 6.0, 7.0])


# ═══════════════════════════════════════════════════════════════════════
# fit() precondition errors
# ═══════════════════════════════════════════════════════════════════════


class TestAlreadyFitted:
    """A second fit always fails, whatever the input."""

    def test_refit_same_data(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        with pytest.raises(AlreadyFittedError, match="already fitted"):
            model.fit(x, y)

    def test_refit_different_data(self, line_data, noisy_line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        x2, y2, _, _ = noisy_line_data
        with pytest.raises(AlreadyFittedError):
            model.fit(x2, y2)

    def test_refit_with_invalid_data_still_already_fitted(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        with pytest.raises(AlreadyFittedError):
            model.fit([1.0], [1.0, 2.0])

    def test_refit_leaves_parameters_unchanged(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        with pytest.raises(AlreadyFittedError):
            model.fit([0.0, 1.0], [0.0, 10.0])
        assert model.slope == 1.0
        assert model.intercept == 4.0

    def test_is_model_state_error(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        with pytest.raises(ModelStateError):
            model.fit(x, y)


class TestLengthMismatch:
    """x and y must pair up one to one."""

    @pytest.mark.parametrize("x, y", [
        ([1.0, 2.0, 3.0], [5.0, 6.0]),
        ([1.0, 2.0], [5.0, 6.0, 7.0]),
        ([1.0], [5.0, 6.0]),
        ([], [1.0]),
    ])
    def test_unequal_lengths(self, x, y):
        with pytest.raises(LengthMismatchError):
            LinearModel().fit(x, y)

    def test_error_carries_lengths(self):
        with pytest.raises(LengthMismatchError) as exc_info:
            LinearModel().fit([1.0, 2.0, 3.0], [5.0, 6.0])
        assert exc_info.value.lengths == {'x': 3, 'y': 2}

    def test_is_dimension_error(self):
        with pytest.raises(DimensionError):
            LinearModel().fit([1.0, 2.0, 3.0], [5.0, 6.0])


class TestInsufficientData:
    """At least two points are needed for two parameters."""

    @pytest.mark.parametrize("x, y", [
        ([], []),
        ([1.0], [5.0]),
    ])
    def test_too_few_points(self, x, y):
        with pytest.raises(InsufficientDataError):
            LinearModel().fit(x, y)

    def test_error_carries_counts(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            LinearModel().fit([1.0], [5.0])
        assert exc_info.value.n_samples == 1
        assert exc_info.value.min_samples == 2

    def test_two_points_enough(self):
        model = LinearModel().fit([0.0, 1.0], [1.0, 3.0])
        assert model.slope == 2.0
        assert model.intercept == 1.0


class TestInvalidInput:
    """Other input problems are ValidationErrors."""

    def test_constant_x(self):
        with pytest.raises(DegenerateInputError, match="zero variance"):
            LinearModel().fit([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])

    def test_constant_non_integer_x(self):
        with pytest.raises(DegenerateInputError):
            LinearModel().fit([0.1, 0.1, 0.1, 0.1], [1.0, 2.0, 3.0, 4.0])

    def test_constant_y_is_fine(self):
        model = LinearModel().fit([1.0, 2.0, 3.0], [4.0, 4.0, 4.0])
        assert model.slope == 0.0
        assert model.intercept == 4.0

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            LinearModel().fit([1.0, np.nan, 3.0], [1.0, 2.0, 3.0])

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            LinearModel().fit([1.0, 2.0, 3.0], [1.0, np.inf, 3.0])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            LinearModel().fit(["a", "b"], [1.0, 2.0])

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            LinearModel().fit([[1.0, 2.0], [3.0, 4.0]], [1.0, 2.0])


class TestFailedFitLeavesModelUnfit:
    """No partial update: a rejected fit changes nothing."""

    @pytest.mark.parametrize("x, y", [
        ([1.0, 2.0, 3.0], [5.0, 6.0]),
        ([1.0], [5.0]),
        ([2.0, 2.0], [1.0, 2.0]),
        ([1.0, np.nan], [1.0, 2.0]),
    ])
    def test_still_unfit(self, x, y):
        model = LinearModel()
        with pytest.raises(ValidationError):
            model.fit(x, y)
        assert not model.is_fitted
        assert model.slope is None
        assert model.intercept is None

    def test_can_fit_after_failure(self, line_data):
        model = LinearModel()
        with pytest.raises(LengthMismatchError):
            model.fit([1.0, 2.0, 3.0], [5.0, 6.0])
        x, y = line_data
        model.fit(x, y)
        assert model.is_fitted


# ═══════════════════════════════════════════════════════════════════════
# predict()
# ═══════════════════════════════════════════════════════════════════════


class TestNotFitted:
    """predict and fitted-state accessors fail on an unfit model."""

    @pytest.mark.parametrize("values", [[1.0], [], [1.0, 2.0, 3.0]])
    def test_predict_unfit(self, values):
        with pytest.raises(NotFittedError, match="must be fitted"):
            LinearModel().predict(values)

    def test_state_checked_before_input(self):
        with pytest.raises(NotFittedError):
            LinearModel().predict("not numbers")

    def test_result_unfit(self):
        with pytest.raises(NotFittedError):
            LinearModel().result

    def test_solution_unfit(self):
        with pytest.raises(NotFittedError):
            LinearModel().solution


class TestPredict:
    """Prediction is intercept + slope * x, elementwise."""

    def test_exact_line(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        np.testing.assert_array_equal(model.predict([4.0]), [8.0])

    def test_large_value_matches_formula(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        got = model.predict([37655.2])[0]
        assert got == model.intercept + model.slope * 37655.2
        assert got == pytest.approx(37659.2, rel=1e-15)

    def test_returns_float64_array(self, line_data):
        x, y = line_data
        out = LinearModel().fit(x, y).predict([1, 2])
        assert isinstance(out, np.ndarray)
        assert out.dtype == np.float64

    def test_empty_input(self, line_data):
        x, y = line_data
        out = LinearModel().fit(x, y).predict([])
        assert out.shape == (0,)

    @pytest.mark.parametrize("size", [1, 2, 17, 1000])
    def test_length_and_order_preserved(self, noisy_line_data, rng, size):
        x, y, _, _ = noisy_line_data
        model = LinearModel().fit(x, y)
        values = rng.uniform(-100, 100, size=size)
        out = model.predict(values)
        assert out.shape == (size,)
        for i, v in enumerate(values):
            assert out[i] == model.intercept + model.slope * v

    def test_idempotent(self, noisy_line_data):
        x, y, _, _ = noisy_line_data
        model = LinearModel().fit(x, y)
        values = np.linspace(-5, 5, 11)
        first = model.predict(values)
        second = model.predict(values)
        np.testing.assert_array_equal(first, second)

    def test_predict_does_not_mutate_model(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        result_before = model.result
        model.predict([10.0, 20.0])
        assert model.result is result_before
        assert model.slope == 1.0
        assert model.intercept == 4.0

    def test_predict_does_not_mutate_input(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        values = np.array([1.0, 2.0])
        model.predict(values)
        np.testing.assert_array_equal(values, [1.0, 2.0])

    def test_predict_2d_rejected(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        with pytest.raises(DimensionError):
            model.predict([[1.0, 2.0]])

    def test_predict_non_numeric_rejected(self, line_data):
        x, y = line_data
        model = LinearModel().fit(x, y)
        with pytest.raises(ValidationError):
            model.predict(["a"])
