"""
Simple linear regression.

Public API:
    LinearModel()          unfit model; .fit(x, y) once, then .predict(values)
    fit(x, y, ...)         shortcut returning a fitted LinearModel

Example:
    >>> from pylinear.regression import LinearModel
    >>> model = LinearModel().fit([1, 2, 3], [5, 6, 7])
    >>> model.predict([4.0])
    array([8.])
    >>> print(model.solution.summary())
"""

from pylinear.regression.design import SimpleDesign, SufficientStats
from pylinear.regression.solution import LinearSolution, LinearParams
from pylinear.regression.model import LinearModel
from pylinear.regression.solvers import fit

__all__ = [
    "fit",
    "LinearModel",
    "SimpleDesign",
    "SufficientStats",
    "LinearSolution",
    "LinearParams",
]
