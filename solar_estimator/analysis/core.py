# solar_estimator/analysis/core.py

import logging
import math

import numpy as np

from .constants import DEFAULT_PARAMETERS, UNBOUNDED
from .errors import InvalidInputError
from .models import SolarResults
from .regions import get_region_catalog

# Configure logging
logger = logging.getLogger(__name__)


def validate_inputs(inputs):
    """Reject site parameters outside their documented ranges."""
    if not math.isfinite(inputs.roof_area) or inputs.roof_area <= 0:
        raise InvalidInputError(f"roof_area must be positive, got {inputs.roof_area}")
    if not math.isfinite(inputs.electricity_usage) or inputs.electricity_usage < 0:
        raise InvalidInputError(
            f"electricity_usage must be non-negative, got {inputs.electricity_usage}"
        )
    if inputs.shading is not None and not 0 <= inputs.shading <= 100:
        raise InvalidInputError(f"shading must be within 0-100%, got {inputs.shading}")
    if inputs.roof_angle is not None and not 0 <= inputs.roof_angle <= 90:
        raise InvalidInputError(
            f"roof_angle must be within 0-90 degrees, got {inputs.roof_angle}"
        )


def angle_efficiency(roof_angle, parameters=DEFAULT_PARAMETERS):
    """1.0 at the optimal tilt, falling off with the cosine of the deviation."""
    if roof_angle is None:
        return 1.0
    return math.cos(math.radians(roof_angle - parameters.optimal_roof_angle))


def calculate_yield_factor(inputs, parameters=DEFAULT_PARAMETERS):
    shading = inputs.shading if inputs.shading is not None else 0.0
    return (
        parameters.base_yield_factor
        * (1 - shading / 100)
        * angle_efficiency(inputs.roof_angle, parameters)
    )


def calculate_system_size(inputs, parameters=DEFAULT_PARAMETERS):
    """
    Size the array to offset annual consumption, limited by the roof.

    Returns (system_size_kw, roof_capacity_kw). The usage target never drops
    below a single panel, and the roof capacity always wins over it.
    """
    usage_target_kw = inputs.electricity_usage * 12 / parameters.specific_yield
    usage_target_kw = max(usage_target_kw, parameters.panel_wattage / 1000)
    roof_capacity_kw = inputs.roof_area / parameters.panel_area_per_kw
    return min(usage_target_kw, roof_capacity_kw), roof_capacity_kw


def calculate_lifetime_savings(annual_savings, net_cost, parameters=DEFAULT_PARAMETERS):
    """Degraded savings summed over the system lifetime, minus the net cost."""
    years = np.arange(parameters.lifetime_years)
    degraded = annual_savings * (1 - parameters.degradation_rate) ** years
    return float(degraded.sum()) - net_cost


def calculate_solar_results(inputs, region, parameters=DEFAULT_PARAMETERS):
    """Estimate size, production, savings and CO2 impact of a rooftop system."""
    validate_inputs(inputs)
    logger.info(
        f"Estimating solar system for '{inputs.location}' in region '{region.id}'"
    )

    yield_factor = calculate_yield_factor(inputs, parameters)
    system_size, roof_capacity = calculate_system_size(inputs, parameters)
    panels_required = max(1, math.ceil(system_size * 1000 / parameters.panel_wattage))
    annual_production = (
        min(system_size, roof_capacity) * parameters.specific_yield * yield_factor
    )
    logger.debug(
        f"Yield factor {yield_factor:.3f}, system size {system_size:.2f} kW, "
        f"roof capacity {roof_capacity:.2f} kW"
    )

    monthly_savings = (
        min(inputs.electricity_usage, annual_production / 12) * region.electricity_rate
    )

    gross_cost = parameters.gross_cost(system_size)
    net_cost = max(
        0.0,
        gross_cost * (1 - region.tax_credit) - region.solar_subsidy * annual_production,
    )

    annual_savings = monthly_savings * 12
    payback_period = net_cost / annual_savings if monthly_savings > 0 else UNBOUNDED
    co2_reduction = annual_production * parameters.grid_emission_factor

    return SolarResults(
        system_size=system_size,
        panels_required=panels_required,
        annual_energy_production=annual_production,
        monthly_savings=monthly_savings,
        payback_period=payback_period,
        co2_reduction=co2_reduction,
        lifetime_savings=calculate_lifetime_savings(
            annual_savings, net_cost, parameters
        ),
        gross_system_cost=gross_cost,
        net_system_cost=net_cost,
        yield_factor=yield_factor,
        trees_equivalent=co2_reduction / parameters.kg_co2_per_tree,
        lifetime_co2_reduction=co2_reduction * parameters.lifetime_years,
    )


def estimate(inputs, region_id, catalog=None, parameters=DEFAULT_PARAMETERS):
    """Resolve ``region_id`` in the catalog and run the estimation."""
    if catalog is None:
        catalog = get_region_catalog()
    region = catalog.get_by_id(region_id)
    return calculate_solar_results(inputs, region, parameters)
