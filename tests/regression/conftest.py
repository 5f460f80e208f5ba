"""
Regression test configuration.

Loads the GDP / life-satisfaction table used as a realistic dataset.
Parsing lives here because the library itself only consumes arrays.
"""

from pathlib import Path

import numpy as np
import pytest

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.fixture(scope="session")
def lifesat_data():
    """(gdp_per_capita, life_satisfaction) columns as float64 arrays."""
    data = np.loadtxt(
        FIXTURES_DIR / "gdp_life_satisfaction.csv",
        delimiter=",",
        skiprows=1,
        usecols=(1, 2),
    )
    return data[:, 0], data[:, 1]
