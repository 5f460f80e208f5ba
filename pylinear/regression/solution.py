"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pylinear.core.result import Result

if TYPE_CHECKING:
    from pylinear.regression.design import SimpleDesign


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for simple linear regression.

    This is the immutable data computed by backends. The sums are kept
    so standard errors can be derived without another pass over the data.
    """
    slope: float
    intercept: float
    n: int
    sum_x: float
    sum_y: float
    sum_xx: float
    sum_xy: float
    rss: float
    tss: float
    df_residual: int

    @property
    def denominator(self) -> float:
        """Shared closed-form denominator n·Σx² − (Σx)²."""
        return self.n * self.sum_xx - self.sum_x * self.sum_x


@dataclass
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides goodness-of-fit diagnostics,
    standard errors, t-statistics and p-values for [intercept, slope].
    """
    _result: Result[LinearParams]
    _design: 'SimpleDesign'

    # Cached computations
    _standard_errors: NDArray[np.floating[Any]] | None = None

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """[intercept, slope], in R's coefficient order."""
        return np.array([self.intercept, self.slope], dtype=np.float64)

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self.intercept + self.slope * self._design.x

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._design.y - self.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        """
        Coefficient of determination, in [0, 1].

        A constant response is fitted exactly by a flat line (any RSS is
        rounding residue), so it reports 1.0.
        """
        if self.tss == 0:
            return 1.0
        return max(0.0, 1.0 - (self.rss / self.tss))

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def residual_std_error(self) -> float:
        df = self.df_residual
        if df <= 0:
            return 0.0
        return float(np.sqrt(self.rss / df))

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Standard errors of [intercept, slope].

        With D = n·Σx² − (Σx)² and σ² = RSS / (n − 2):
            SE(intercept) = sqrt(σ² Σx² / D)
            SE(slope)     = sqrt(σ² n / D)

        Two observations leave no residual degrees of freedom, so both
        are NaN.

        The cached array is read-only; t-statistics and p-values derive
        from it.
        """
        if self._standard_errors is not None:
            return self._standard_errors

        params = self._result.params
        if params.df_residual <= 0:
            se = np.full(2, np.nan, dtype=np.float64)
        else:
            sigma_sq = params.rss / params.df_residual
            d = params.denominator
            se = np.sqrt(
                sigma_sq * np.array([params.sum_xx, params.n], dtype=np.float64) / d
            )
        se.flags.writeable = False
        self._standard_errors = se
        return self._standard_errors

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for [intercept, slope]."""
        se = self.standard_errors
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / se
        # Zero SE (perfect fit) gives inf or nan; report NA
        return np.where(np.isfinite(t), t, np.nan)

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from Student's t with df_residual degrees of freedom."""
        t = self.t_statistics
        if self.df_residual <= 0:
            return np.full(2, np.nan, dtype=np.float64)
        return 2.0 * stats.t.sf(np.abs(t), self.df_residual)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style summary output."""
        lines = [
            "Simple Linear Regression Results",
            "=" * 66,
            f"Observations: {self._design.n}",
            f"R-squared: {self.r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 66,
            f"{'':<12} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>12}",
            "-" * 66,
        ]

        names = ('(Intercept)', 'x')
        for name, coef, se, t, p in zip(
            names, self.coefficients, self.standard_errors,
            self.t_statistics, self.p_values
        ):
            se_str = f"{se:12.6f}" if not np.isnan(se) else f"{'NA':>12}"
            t_str = f"{t:10.3f}" if not np.isnan(t) else f"{'NA':>10}"
            p_str = f"{p:12.4g}" if not np.isnan(p) else f"{'NA':>12}"
            lines.append(f"{name:<12} {coef:14.6f} {se_str} {t_str} {p_str}")

        lines.append("-" * 66)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self._design.n}, slope={self.slope:.6g}, "
            f"intercept={self.intercept:.6g}, r_squared={self.r_squared:.4f})"
        )
