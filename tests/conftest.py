"""Shared fixtures for the solar estimator tests."""

import numpy as np
import pytest

from solar_estimator.analysis.models import Region, SolarInputs
from solar_estimator.analysis.regions import RegionCatalog


class ConstantJitter:
    """Stand-in for a numpy Generator that always returns the same offset."""

    def __init__(self, offset=0.0):
        self.offset = offset

    def uniform(self, low, high, size=None):
        return np.full(size, self.offset, dtype=float)


@pytest.fixture
def no_jitter():
    return ConstantJitter(0.0)


@pytest.fixture
def constant_jitter():
    """Factory for jitter sources pinned to a fixed offset."""
    return ConstantJitter


@pytest.fixture
def california():
    """Tariff record used throughout the estimation scenarios."""
    return Region(
        id="ca",
        name="California",
        electricity_rate=0.23,
        solar_subsidy=0.05,
        tax_credit=0.30,
        type="state",
    )


@pytest.fixture
def reference_inputs():
    return SolarInputs(
        location="Sacramento, CA", roof_area=50, electricity_usage=900, shading=0
    )


@pytest.fixture
def small_catalog():
    return RegionCatalog(
        [
            {"id": "a", "name": "Alpha", "electricity_rate": 0.2,
             "solar_subsidy": 0.0, "tax_credit": 0.1, "type": "state"},
            {"id": "b", "name": "Beta", "electricity_rate": 0.1,
             "solar_subsidy": 0.0, "tax_credit": 0.0, "type": "state"},
            {"id": "a-1", "name": "Alpha One", "electricity_rate": 0.25,
             "solar_subsidy": 0.01, "tax_credit": 0.1, "type": "district",
             "parent_id": "a"},
            {"id": "a-2", "name": "Alpha Two", "electricity_rate": 0.22,
             "solar_subsidy": 0.01, "tax_credit": 0.1, "type": "district",
             "parent_id": "a"},
        ]
    )
