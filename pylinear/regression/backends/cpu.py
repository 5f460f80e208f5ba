"""
Vectorized CPU backend for simple linear regression.

Accumulates the sufficient statistics with NumPy reductions and solves
the normal equations in closed form.
"""

from pylinear.core.compute.timing import Timer
from pylinear.core.result import Result
from pylinear.regression.design import SimpleDesign
from pylinear.regression.solution import LinearParams
from pylinear.regression.backends._closed_form import solve_from_sums


class CPUClosedFormBackend:
    """
    CPU backend using NumPy reductions.

    Implements the Backend protocol for SimpleDesign -> LinearParams.

    NumPy sums with pairwise summation, so on long inputs the result may
    differ from a strict left-to-right pass in the last few bits.
    """

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, design: SimpleDesign) -> Result[LinearParams]:
        """
        Solve OLS from vectorized sums.

        Args:
            design: Validated regression design

        Returns:
            Result containing LinearParams

        Raises:
            DegenerateInputError: If the denominator is zero
        """
        timer = Timer()
        timer.start()

        with timer.section('sums'):
            sums = design.sums()

        return solve_from_sums(design, sums, timer, self.name)
