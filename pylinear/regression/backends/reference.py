"""
Sequential reference backend for simple linear regression.

Walks the (x, y) pairs once, in input order, with plain float
accumulators. Slower than the vectorized backend but its rounding is
fully determined by the input order, which makes its output reproducible
bit for bit across platforms and BLAS builds.
"""

from pylinear.core.compute.timing import Timer
from pylinear.core.result import Result
from pylinear.regression.design import SimpleDesign, SufficientStats
from pylinear.regression.solution import LinearParams
from pylinear.regression.backends._closed_form import solve_from_sums


class SequentialBackend:
    """
    Single-pass accumulation backend.

    Implements the Backend protocol for SimpleDesign -> LinearParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_sequential'

    def solve(self, design: SimpleDesign) -> Result[LinearParams]:
        timer = Timer()
        timer.start()

        with timer.section('sums'):
            sum_x = 0.0
            sum_y = 0.0
            sum_xx = 0.0
            sum_xy = 0.0
            for xi, yi in zip(design.x.tolist(), design.y.tolist()):
                sum_x += xi
                sum_y += yi
                sum_xx += xi * xi
                sum_xy += xi * yi

        sums = SufficientStats(
            n=design.n,
            sum_x=sum_x,
            sum_y=sum_y,
            sum_xx=sum_xx,
            sum_xy=sum_xy,
        )
        return solve_from_sums(design, sums, timer, self.name)
