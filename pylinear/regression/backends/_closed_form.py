"""
Closed-form OLS shared by all regression backends.

Backends differ only in how they accumulate the sufficient statistics;
turning those sums into parameters is the same everywhere.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pylinear.core.compute.timing import Timer
from pylinear.core.exceptions import DegenerateInputError
from pylinear.core.result import Result
from pylinear.regression.design import SimpleDesign, SufficientStats
from pylinear.regression.solution import LinearParams


def solve_from_sums(
    design: SimpleDesign,
    sums: SufficientStats,
    timer: Timer,
    backend_name: str,
) -> Result[LinearParams]:
    """
    Build the fit Result from accumulated sums.

        D         = n·Σx² − Σx·Σx
        intercept = (Σy·Σx² − Σx·Σxy) / D
        slope     = (n·Σxy − Σx·Σy) / D

    The caller has started the timer; it is stopped here.

    D is n² times the variance of x, so it cannot be negative in exact
    arithmetic; a non-positive value means the sums cancelled away.

    Raises:
        DegenerateInputError: If D is not positive
    """
    n = float(sums.n)

    with timer.section('parameters'):
        d = n * sums.sum_xx - sums.sum_x * sums.sum_x
        if d <= 0.0:
            raise DegenerateInputError(
                "x: closed-form denominator n*sum(x^2) - sum(x)^2 is not positive "
                f"({d!r})",
                denominator=d,
            )
        intercept = (sums.sum_y * sums.sum_xx - sums.sum_x * sums.sum_xy) / d
        slope = (n * sums.sum_xy - sums.sum_x * sums.sum_y) / d

    with timer.section('statistics'):
        residuals = design.y - (intercept + slope * design.x)
        rss = float(residuals @ residuals)
        if np.all(design.y == design.y[0]):
            # np.mean of a constant can round off the constant itself
            tss = 0.0
        else:
            y_mean = np.mean(design.y)
            tss = float(np.sum((design.y - y_mean) ** 2))

    timer.stop()

    params = LinearParams(
        slope=float(slope),
        intercept=float(intercept),
        n=sums.n,
        sum_x=sums.sum_x,
        sum_y=sums.sum_y,
        sum_xx=sums.sum_xx,
        sum_xy=sums.sum_xy,
        rss=rss,
        tss=tss,
        df_residual=sums.n - 2,
    )

    info: dict[str, Any] = {
        'method': 'closed_form',
        'denominator': float(d),
    }

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=backend_name,
        warnings=(),
    )
