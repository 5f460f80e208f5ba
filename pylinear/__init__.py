"""
PyLinear: closed-form simple linear regression for Python.

Fits y = slope * x + intercept by ordinary least squares and predicts
y for new x.

Submodules:
    regression: LinearModel and the fit() shortcut
    core: Exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from pylinear import regression
from pylinear.regression import LinearModel, fit

__all__ = [
    "__version__",
    "regression",
    "LinearModel",
    "fit",
]
