"""
Exception hierarchy for PyLinear.

All exceptions inherit from PyLinearError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Every check runs before any model state is touched
"""


class PyLinearError(Exception):
    """Base exception for all PyLinear errors."""
    pass


class ValidationError(PyLinearError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Paired arrays have different lengths.

    Attributes:
        lengths: Mapping of parameter name to observed length
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths if lengths is not None else {}


class InsufficientDataError(ValidationError):
    """
    Too few observations to estimate the requested parameters.

    A line has two free parameters, so a single point cannot determine it.

    Attributes:
        n_samples: Number of observations supplied
        min_samples: Number of observations required
    """

    def __init__(
        self,
        message: str,
        n_samples: int | None = None,
        min_samples: int | None = None
    ):
        super().__init__(message)
        self.n_samples = n_samples
        self.min_samples = min_samples


class DegenerateInputError(ValidationError):
    """
    Predictor has zero variance.

    When every x is identical the closed-form denominator
    n·Σx² − (Σx)² vanishes and slope is undefined.

    Attributes:
        denominator: The computed denominator, if it was reached
    """

    def __init__(self, message: str, denominator: float | None = None):
        super().__init__(message)
        self.denominator = denominator


class ModelStateError(PyLinearError):
    """
    Operation is not valid in the model's current lifecycle state.
    """
    pass


class AlreadyFittedError(ModelStateError):
    """fit() called on a model that has already been fitted."""
    pass


class NotFittedError(ModelStateError):
    """Fitted-state operation (predict, diagnostics) called on an unfit model."""
    pass
