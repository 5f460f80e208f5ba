"""
Shared compute infrastructure for PyLinear.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared numeric infrastructure.

Submodules:
    timing: Execution timing utilities
"""

from pylinear.core.compute.timing import Timer

__all__ = [
    "Timer",
]
